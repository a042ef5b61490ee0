"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras y estrictas (Pydantic v2).
- El dominio no conoce CLI, portapapeles ni fuentes de aleatoriedad: solo conceptos del problema.
"""
