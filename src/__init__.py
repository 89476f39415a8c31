"""Dice notation roller."""
