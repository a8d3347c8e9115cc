"""Organ pledges made by donors."""
