"""Built-in minimal translations for the repository server.

Used for any language whose translation file is missing or broken, so the
server always has something sensible to say.
"""

from typing import Dict

from infrastructure.i18n.models import DEFAULT_LANGUAGE

BUILTIN_TRANSLATIONS: Dict[str, Dict[str, str]] = {
    "ru": {
        "server_started": "Сервер запущен на порту %d",
        "server_stopped": "Сервер остановлен",
        "package_uploaded": "Пакет загружен",
        "package_not_found": "Пакет не найден",
        "invalid_request": "Неверный запрос",
        "internal_error": "Внутренняя ошибка сервера",
    },
    "en": {
        "server_started": "Server started on port %d",
        "server_stopped": "Server stopped",
        "package_uploaded": "Package uploaded",
        "package_not_found": "Package not found",
        "invalid_request": "Invalid request",
        "internal_error": "Internal server error",
    },
    "de": {
        "server_started": "Server auf Port %d gestartet",
        "server_stopped": "Server gestoppt",
        "package_uploaded": "Paket hochgeladen",
        "package_not_found": "Paket nicht gefunden",
        "invalid_request": "Ungültige Anfrage",
        "internal_error": "Interner Serverfehler",
    },
    "fr": {
        "server_started": "Serveur démarré sur le port %d",
        "server_stopped": "Serveur arrêté",
        "package_uploaded": "Paquet téléchargé",
        "package_not_found": "Paquet introuvable",
        "invalid_request": "Requête invalide",
        "internal_error": "Erreur interne du serveur",
    },
}


def get_default_translations(language: str) -> Dict[str, str]:
    """Return a copy of the built-in table for a language.

    Languages without a built-in set get the English one.
    """
    table = BUILTIN_TRANSLATIONS.get(language, BUILTIN_TRANSLATIONS[DEFAULT_LANGUAGE])
    return dict(table)
