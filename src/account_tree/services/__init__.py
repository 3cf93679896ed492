"""Reconciliation services composed by the account root node."""
