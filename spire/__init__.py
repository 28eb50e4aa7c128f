"""
Spire of the Path - silnik łamigłówki na planszy hexagonalnej.

Pakiety:
- core: geometria hex, siatka, pola, wyszukiwanie ścieżki, RNG, konfiguracja
- game: silnik tur, wrogowie, snapshot planszy, tryby zdolności
- events: log zdarzeń gry (JSON)
"""

__version__ = "1.0.0"
