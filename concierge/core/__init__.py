"""
Core domain layer.

Session status rules, domain exceptions and the borrower intake logic.
Nothing here touches the database or the network.
"""
