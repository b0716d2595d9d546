"""Delivery interfaces for the notification engine."""
