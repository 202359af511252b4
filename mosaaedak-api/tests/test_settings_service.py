from app.models import BotSettings
from app.models.bot_settings import DEFAULT_MODEL_NAME
from app.services.default_prompt import DEFAULT_SYSTEM_PROMPT
from app.services.settings_service import (
    MASKED_SECRET_MARKER,
    SettingsProvider,
    ensure_settings,
    get_settings,
    is_masked_value,
    mask_secret,
    settings_report,
    update_settings,
)


class TestEnsureSettings:
    def test_seeds_defaults_once(self, db_session):
        ensure_settings(db_session)
        ensure_settings(db_session)
        db_session.commit()

        assert db_session.query(BotSettings).count() == 1
        record = get_settings(db_session)
        assert record.api_key == ""
        assert record.model_name == DEFAULT_MODEL_NAME
        assert record.system_prompt == DEFAULT_SYSTEM_PROMPT

    def test_default_prompt_mentions_sentinel(self):
        assert "HUMAN_HELP_NEEDED" in DEFAULT_SYSTEM_PROMPT


class TestUpdateSettings:
    def test_omitted_fields_stay_unchanged(self, db_session):
        update_settings(db_session, {"api_key": "sk-or-1234567890abcd", "model_name": "openai/gpt-4o-mini"})
        update_settings(db_session, {"system_prompt": "Be brief", "model_name": None})

        record = get_settings(db_session)
        assert record.api_key == "sk-or-1234567890abcd"
        assert record.model_name == "openai/gpt-4o-mini"
        assert record.system_prompt == "Be brief"

    def test_masked_auth_token_is_ignored(self, db_session):
        update_settings(db_session, {"twilio_auth_token": "real-token-value-1234"})
        changed = update_settings(db_session, {"twilio_auth_token": mask_secret("real-token-value-1234")})

        assert changed == []
        assert get_settings(db_session).twilio_auth_token == "real-token-value-1234"

    def test_masked_api_key_is_ignored(self, db_session):
        update_settings(db_session, {"api_key": "sk-or-1234567890abcd"})
        update_settings(db_session, {"api_key": f"sk-or-12{MASKED_SECRET_MARKER}abcd"})

        assert get_settings(db_session).api_key == "sk-or-1234567890abcd"

    def test_empty_string_clears_value(self, db_session):
        update_settings(db_session, {"support_agent_phone": "+966511111111"})
        update_settings(db_session, {"support_agent_phone": ""})

        assert get_settings(db_session).support_agent_phone == ""

    def test_unknown_fields_are_ignored(self, db_session):
        changed = update_settings(db_session, {"password_hash": "x", "model_name": "m"})
        assert changed == ["model_name"]

    def test_updated_at_changes(self, db_session):
        before = get_settings(db_session).updated_at
        update_settings(db_session, {"model_name": "other/model"})
        assert get_settings(db_session).updated_at != before


class TestSettingsProvider:
    def test_get_returns_fresh_snapshot(self, db_session):
        provider = SettingsProvider(db_session)
        first = provider.get()
        provider.update({"api_key": "new-key-value-abcdef"})

        assert first.api_key == ""
        assert provider.get().api_key == "new-key-value-abcdef"

    def test_has_twilio_credentials(self, db_session):
        provider = SettingsProvider(db_session)
        assert provider.get().has_twilio_credentials is False
        provider.update({"twilio_account_sid": "AC123", "twilio_auth_token": "tok"})
        assert provider.get().has_twilio_credentials is True


class TestMaskSecret:
    def test_empty(self):
        assert mask_secret("") == ""
        assert mask_secret(None) == ""

    def test_keeps_prefix_and_suffix(self):
        masked = mask_secret("sk-or-v1-abcdefghijklmnop")
        assert masked.startswith("sk-or-v1")
        assert masked.endswith("mnop")
        assert "abcdefghijkl" not in masked

    def test_short_secret_fully_masked(self):
        assert mask_secret("short") == MASKED_SECRET_MARKER

    def test_is_masked_value(self):
        assert is_masked_value(mask_secret("sk-or-v1-abcdefghijklmnop")) is True
        assert is_masked_value("plain") is False
        assert is_masked_value(None) is False


class TestSettingsReport:
    def test_secrets_reduced_to_booleans(self, db_session):
        update_settings(db_session, {"api_key": "sk-secret-value-xyz", "twilio_phone_number": "+14155238886"})
        report = settings_report(get_settings(db_session))

        assert report["api_key"] is True
        assert report["twilio_auth_token"] is False
        assert report["twilio_phone_number"] == "+14155238886"
        assert "sk-secret-value-xyz" not in str(report)
