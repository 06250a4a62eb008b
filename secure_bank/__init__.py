"""
Secure Bank - Source Package

A single bank account with transaction notifications and an optional
withdrawal-limiting wrapper.

DESIGN PRINCIPLES:
1. Account rules live in one place (BankAccount)
2. Extra policy is layered on by wrapping, never by editing the account
3. Rejected operations are returned as results, not raised
4. Every operation is audited
"""

__version__ = "1.0.0"
__author__ = "Secure Bank Team"
