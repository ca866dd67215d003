"""Test suite for the forest fire game."""
