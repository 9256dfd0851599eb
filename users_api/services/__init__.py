"""
services/ — Business logic.

Services hold the rules (date parsing, age derivation, response mapping)
and delegate storage to repositories/. Routers stay thin.
"""
