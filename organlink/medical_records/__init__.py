"""Medical records written by doctors about an account."""
