"""Organ requests submitted by patients and reviewed by doctors."""
