"""
Application Layer Package

Data transfer objects that turn the JSON answers of the rabbit into typed
records.
"""
