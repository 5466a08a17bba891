"""Pre-translated labels for the supported planner languages.

Day tables are Monday-first. Use :func:`short_day_name` to look a name up by
the 0=Sunday weekday numbering used everywhere else.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple


@dataclass(frozen=True)
class Translation:
    days: Tuple[str, ...]
    days_short: Tuple[str, ...]
    months: Tuple[str, ...]
    notes: str
    week: str
    reflections: str
    planning: str


TRANSLATIONS: Mapping[str, Translation] = MappingProxyType(
    {
        "en": Translation(
            days=("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"),
            days_short=("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"),
            months=(
                "January", "February", "March", "April", "May", "June",
                "July", "August", "September", "October", "November", "December",
            ),
            notes="Notes",
            week="Week",
            reflections="Weekly Reflections",
            planning="Weekly Planning",
        ),
        "es": Translation(
            days=("Lunes", "Martes", "Miércoles", "Jueves", "Viernes", "Sábado", "Domingo"),
            days_short=("Lun", "Mar", "Mié", "Jue", "Vie", "Sáb", "Dom"),
            months=(
                "Enero", "Febrero", "Marzo", "Abril", "Mayo", "Junio",
                "Julio", "Agosto", "Septiembre", "Octubre", "Noviembre", "Diciembre",
            ),
            notes="Notas",
            week="Semana",
            reflections="Reflexiones Semanales",
            planning="Planificación Semanal",
        ),
        "fr": Translation(
            days=("Lundi", "Mardi", "Mercredi", "Jeudi", "Vendredi", "Samedi", "Dimanche"),
            days_short=("Lun", "Mar", "Mer", "Jeu", "Ven", "Sam", "Dim"),
            months=(
                "Janvier", "Février", "Mars", "Avril", "Mai", "Juin",
                "Juillet", "Août", "Septembre", "Octobre", "Novembre", "Décembre",
            ),
            notes="Notes",
            week="Semaine",
            reflections="Réflexions Hebdomadaires",
            planning="Planification Hebdomadaire",
        ),
        "de": Translation(
            days=("Montag", "Dienstag", "Mittwoch", "Donnerstag", "Freitag", "Samstag", "Sonntag"),
            days_short=("Mo", "Di", "Mi", "Do", "Fr", "Sa", "So"),
            months=(
                "Januar", "Februar", "März", "April", "Mai", "Juni",
                "Juli", "August", "September", "Oktober", "November", "Dezember",
            ),
            notes="Notizen",
            week="Woche",
            reflections="Wöchentliche Reflexionen",
            planning="Wochenplanung",
        ),
    }
)


def get_translation(language: str) -> Translation:
    try:
        return TRANSLATIONS[language]
    except KeyError:
        raise ValueError(f"Unsupported language: {language}") from None


def short_day_name(translation: Translation, weekday: int) -> str:
    # weekday: 0=Sunday .. 6=Saturday
    return translation.days_short[(weekday + 6) % 7]


def month_name(translation: Translation, month: int) -> str:
    return translation.months[month - 1]
