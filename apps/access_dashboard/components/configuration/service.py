"""
Configuration Service
Profile preferences and interface language kept in the session
"""
PROFILE_FIELDS = ('name', 'email', 'document', 'role')


class ConfigurationService:
    """Service for Configuration component"""

    def __init__(self, languages, default_language):
        self.languages = tuple(languages)
        self.default_language = default_language

    def clean_language(self, language):
        return language if language in self.languages else self.default_language

    def profile_form(self, user, preferences):
        """Values shown in the profile form: saved preferences win"""
        user = user or {}
        preferences = preferences or {}
        return {field: preferences.get(field) or user.get(field) or '' for field in PROFILE_FIELDS}

    def clean_preferences(self, form):
        preferences = {field: (form.get(field) or '').strip() for field in PROFILE_FIELDS}
        preferences['email'] = preferences['email'].lower()
        return preferences
