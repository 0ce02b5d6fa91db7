# src/gcharness/cli/__init__.py
