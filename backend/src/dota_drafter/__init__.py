"""Dota 2 drafting assistant - synergy and counter scoring."""
