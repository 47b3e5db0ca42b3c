"""Bad/Good snippet pairs, one subpackage per SOLID principle.

Every module in here is embedded verbatim in the README, so each file starts
with its ``# Bad`` or ``# Good`` marker and carries nothing else.
"""
