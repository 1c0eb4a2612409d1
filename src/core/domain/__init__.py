"""Modelos y errores del dominio.

- Estructuras de datos puras (Pydantic v2) y la taxonomía de errores.
- El dominio no conoce HTTP, CLI ni git: solo nombres, wordlists y metadata.
"""
