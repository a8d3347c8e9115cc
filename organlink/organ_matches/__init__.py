"""Candidate request/pledge pairings recorded by doctors."""
