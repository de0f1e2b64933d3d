"""Tier-gated prefix command router for the RDSS Discord bot."""
