# config_local.example.py

"""
Example local overrides.

Usage:
  1) Copy this file to `config_local.py`
  2) Adjust values for your machine
  3) Never commit `config_local.py` (it is gitignored)

Prefer `.env` for everything else. Only the override below is read.
"""

# Example: short stats line ("T:3 A:2 C:1") on narrow terminals
# COMPACT = True
