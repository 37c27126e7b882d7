"""
polyset CLI - Command-line interface for polygon set operations.

Usage:
    polyset-cli union square.csv triangle.csv -o output.csv
    polyset-cli difference square.csv triangle.csv --render diff.png
    polyset-cli apply intersection a.csv b.csv c.csv
    polyset-cli run jobs/union.yaml
"""

__version__ = "1.0.0"
