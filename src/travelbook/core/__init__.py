"""
Core Travelbook functionality: field validation and configuration.
"""
