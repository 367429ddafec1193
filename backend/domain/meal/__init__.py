"""Meal domain - cafeteria meals, their classification and search.

Aggregate, value objects, repository port and the domain service that
filters, paginates and summarizes meals.
"""
