"""
Command Line Interface Package

Process entry point for the CLI ATM Machine.

Command Structure:
- atm: interactive login to the default account, then the ATM prompt
- atm <transaction> --flags: run one transaction, then the ATM prompt
- atm version / atm config: utility commands
"""
