"""Core (UI-agnostic) Artistly logic.

This package contains:
- the in-memory artist and booking dataset
- catalog criteria normalization and filtering
- page compute functions (JSON-serializable payloads)
- quote / status action hooks and the onboarding submission
- chart helpers (Altair -> Vega-Lite spec dict)
"""
