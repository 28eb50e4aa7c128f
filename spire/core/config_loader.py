"""
Loader konfiguracji gry z automatycznym uzupełnianiem wartości domyślnych.

Konfiguracja leży w pliku YAML:
- defaults.yaml: sekcja `game` z parametrami planszy i zdolności

Logika merge (uzupełniania defaults):
    1. Wczytaj defaults.yaml
    2. Weź sekcję `game`
    3. Nałóż na nią nadpisania użytkownika (np. z --config albo z API)
    4. Nested dicts są łączone rekurencyjnie

Przykład:
    defaults.yaml:
        game:
          ring_size: 7
          teleport_charges: 1

    override:
        {"teleport_charges": 3}

    wynik:
        {"ring_size": 7, "teleport_charges": 3}

Użycie:
    >>> loader = ConfigLoader("data/")
    >>> game_data = loader.load_game_config({"seed": 7})
    >>> game_data["ring_size"]
    7
"""

from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, Optional
import copy

import yaml


class ConfigLoader:
    """
    Źródło konfiguracji gry: defaults.yaml + nadpisania.

    Attributes:
        data_path (Path): Folder z defaults.yaml
        _defaults (Optional[Dict]): Wczytany defaults.yaml (None = jeszcze nie)

    Example:
        >>> loader = ConfigLoader("data/")
        >>> loader.get_game_defaults()["mountain_radius"]
        2
    """

    def __init__(self, data_path: str = "data/"):
        """
        Args:
            data_path: Folder z plikami YAML gry
        """
        self.data_path = Path(data_path)
        self._defaults: Optional[Dict] = None

    # ─────────────────────────────────────────────────────────────────────────
    # WCZYTYWANIE PLIKÓW
    # ─────────────────────────────────────────────────────────────────────────

    def _load_yaml(self, filename: str) -> Dict:
        """
        Wczytuje plik YAML z folderu danych.

        Raises:
            FileNotFoundError: Jeśli plik nie istnieje
        """
        return load_yaml_file(self.data_path / filename)

    def get_defaults(self) -> Dict:
        """
        Zawartość defaults.yaml.

        Plik czytany jest raz, potem zwracany z pamięci.
        """
        if self._defaults is None:
            self._defaults = self._load_yaml("defaults.yaml")
        return self._defaults

    def get_game_defaults(self) -> Dict:
        """Sekcja `game` z defaults.yaml."""
        return self.get_defaults().get("game", {})

    def get_section(self, name: str) -> Dict:
        """
        Dowolna sekcja z defaults.yaml.

        Raises:
            KeyError: Jeśli sekcja nie istnieje
        """
        defaults = self.get_defaults()
        if name not in defaults:
            raise KeyError(f"Section '{name}' not found in defaults.yaml")
        return copy.deepcopy(defaults[name])

    # ─────────────────────────────────────────────────────────────────────────
    # KONFIGURACJA GRY
    # ─────────────────────────────────────────────────────────────────────────

    def load_game_config(self, overrides: Optional[Dict[str, Any]] = None) -> Dict:
        """
        Konfiguracja gry: defaults + nadpisania.

        Args:
            overrides: Słownik nadpisujący wartości z defaults

        Returns:
            Dict: Pełna konfiguracja gry (kopia - można ją modyfikować)
        """
        result = copy.deepcopy(self.get_game_defaults())
        if overrides:
            result = self._deep_merge(result, overrides)
        return result

    def load_game_config_file(self, filepath: str) -> Dict:
        """
        Konfiguracja gry z pliku użytkownika nałożona na defaults.

        Plik może mieć sekcję `game` albo same klucze na najwyższym poziomie.

        Raises:
            FileNotFoundError: Jeśli plik nie istnieje
        """
        data = load_yaml_file(Path(filepath))
        return self.load_game_config(data.get("game", data))

    # ─────────────────────────────────────────────────────────────────────────
    # HELPERY
    # ─────────────────────────────────────────────────────────────────────────

    @staticmethod
    def _deep_merge(base: Dict, override: Dict) -> Dict:
        """
        Rekurencyjne łączenie słowników (wynik to nowa kopia).

        Klucze z override wygrywają;
        słowniki obecne po obu stronach są łączone głębiej.
        """
        result = copy.deepcopy(base)

        for key, value in override.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = ConfigLoader._deep_merge(result[key], value)
            else:
                result[key] = copy.deepcopy(value)

        return result

    def reload(self) -> None:
        """
        Zapomina wczytany defaults.yaml.

        Następne get_defaults() przeczyta plik z dysku.
        """
        self._defaults = None


def load_yaml_file(filepath: Path) -> Dict:
    """
    Wczytuje pojedynczy plik YAML.

    Raises:
        FileNotFoundError: Jeśli plik nie istnieje
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}
