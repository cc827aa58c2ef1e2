"""Seller payout services: calculators, repositories and the stats service."""
