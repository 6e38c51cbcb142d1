"""
Budget subsystem.

Components:
- ledger.py: BudgetItem, BudgetType, add/remove items and running totals
"""
