"""
Arrow Tuning App
Setup form, YAML loader, option registry and command-line calculator.
"""
