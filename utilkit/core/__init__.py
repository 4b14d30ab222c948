"""
Core building blocks of utilkit: numeric, text, calendar and storage modules.

The four areas are independent leaves; they share only configuration,
exceptions and the domain value objects.
"""
