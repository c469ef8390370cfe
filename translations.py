# translations.py

import logging

LANGUAGES = {
    "en": "English",
    "fr": "Français",
}

# This dictionary holds the dashboard labels.
# The structure is: {language_code: {key: translation_string}}
TRANSLATIONS = {
    "en": {
        "Email Tracking Dashboard": "Email Tracking Dashboard",
        "Track and monitor email delivery status": "Track and monitor email delivery status",
        "Total Emails": "Total Emails",
        "Sent Emails": "Sent Emails",
        "Failed Emails": "Failed Emails",
        "Delivery Status Distribution": "Delivery Status Distribution",
        "Email Statistics": "Email Statistics",
        "Search by email, company, or name...": "Search by email, company, or name...",
        "Loading data...": "Loading data...",
        "Failed to fetch data.": "Failed to fetch data.",
        "Showing {shown} of {total} records": "Showing {shown} of {total} records",
        "No records match your search.": "No records match your search.",
        "Download as CSV": "Download as CSV",
        "Debug Information": "Debug Information",
        "Email": "Email",
        "Recipient": "Recipient",
        "Company": "Company",
        "Status": "Status",
        "Date": "Date",
        "Sent": "Sent",
        "Not Sent": "Not Sent",
        "Total": "Total",
    },
    "fr": {
        "Email Tracking Dashboard": "Tableau de suivi des e-mails",
        "Track and monitor email delivery status": "Suivez l'état de distribution des e-mails",
        "Total Emails": "Total des e-mails",
        "Sent Emails": "E-mails envoyés",
        "Failed Emails": "E-mails en échec",
        "Delivery Status Distribution": "Répartition des statuts de distribution",
        "Email Statistics": "Statistiques des e-mails",
        "Search by email, company, or name...": "Rechercher par e-mail, entreprise ou nom...",
        "Loading data...": "Chargement des données...",
        "Failed to fetch data.": "Échec de la récupération des données.",
        "Showing {shown} of {total} records": "{shown} enregistrements affichés sur {total}",
        "No records match your search.": "Aucun enregistrement ne correspond à votre recherche.",
        "Download as CSV": "Télécharger en CSV",
        "Debug Information": "Informations de débogage",
        "Email": "E-mail",
        "Recipient": "Destinataire",
        "Company": "Entreprise",
        "Status": "Statut",
        "Date": "Date",
        "Sent": "Envoyé",
        "Not Sent": "Non envoyé",
        "Total": "Total",
    },
}

# Default language if no session state is set
DEFAULT_LANG = "en"

# Global variable to store the selected language
_selected_lang = DEFAULT_LANG

def set_language(lang_code):
    """Sets the global language for translations."""
    global _selected_lang
    if lang_code in LANGUAGES:
        _selected_lang = lang_code
    else:
        _selected_lang = DEFAULT_LANG # Fallback to default if invalid code

def _t(key, **kwargs):
    """
    Translates a given key into the selected language and formats it with kwargs.
    If the key is not found, it returns the key itself as a fallback.
    """
    translation = TRANSLATIONS.get(_selected_lang, {}).get(key, key)
    try:
        return translation.format(**kwargs)
    except (KeyError, IndexError) as e:
        logging.warning(f"Translation error: {e!r} for key '{key}' in language '{_selected_lang}'")
        return translation
