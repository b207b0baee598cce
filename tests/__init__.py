"""Test suite for the toroidal fire simulation."""
