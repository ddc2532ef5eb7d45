"""
Tests for the translation facade and result types.
"""

import dataclasses
from unittest.mock import Mock

import pytest
import requests

from lingochain import (
    NoProviderAvailable,
    TranslationRequest,
    TranslationResult,
    TranslationService,
    ValidationError,
    translate_text,
)
from lingochain.translate import ProviderChain


@pytest.fixture
def service_for(chain_config, make_session):
    def build(routes, **kwargs):
        session = make_session(routes)
        chain = ProviderChain(config=chain_config, session=session)
        return TranslationService(chain=chain, **kwargs), session
    return build


class TestTranslationService:
    """End-to-end behaviour through the facade."""

    def test_telugu_end_to_end(self, service_for, urls, make_response, make_google_body):
        """Test a Telugu translation carries an ASCII pronunciation."""
        service, _ = service_for({urls["google"]: make_response(make_google_body("హలో"))})
        result = service.translate("Hello", "te")

        assert result.text == "హలో"
        assert result.pronunciation
        assert result.pronunciation.isascii()
        assert result.pronunciation.isalpha()

    def test_result_text_is_trimmed(self, service_for, urls, make_response, make_google_body):
        """Test surrounding whitespace is stripped from the result."""
        service, _ = service_for({urls["google"]: make_response(make_google_body("  Bonjour \n"))})
        assert service.translate("Hello", "fr").text == "Bonjour"

    def test_fallback_to_secondary(self, service_for, urls, make_response):
        """Test a primary timeout falls through to the secondary."""
        service, _ = service_for({
            urls["google"]: requests.Timeout("timed out"),
            urls["libre_a"]: make_response({"translatedText": "secondary"}),
            urls["mymemory"]: make_response({"responseData": {"translatedText": "tertiary"}}),
        })
        assert service.translate("Hello", "fr").text == "secondary"

    def test_exhaustion(self, service_for, urls, make_response):
        """Test exhaustion surfaces as NoProviderAvailable."""
        service, _ = service_for({
            urls["google"]: requests.Timeout("timed out"),
            urls["libre_a"]: make_response({"error": "Invalid API key"}, status_code=403),
            urls["libre_b"]: make_response({"error": "Invalid API key"}, status_code=403),
            urls["mymemory"]: make_response({"matches": []}),
        })
        with pytest.raises(NoProviderAvailable):
            service.translate("Hello", "te")

    def test_validation_happens_before_network(self, service_for):
        """Test blank text never reaches the network."""
        service, session = service_for({})
        with pytest.raises(ValidationError):
            service.translate("   ", "te")
        assert session.calls == []

    def test_clean_input(self, service_for, urls, make_response, make_google_body):
        """Test clean_input normalizes the text that is sent."""
        service, session = service_for(
            {urls["google"]: make_response(make_google_body("ok"))},
            clean_input=True,
        )
        service.translate("  “Hello”\n\n world!!!  ", "fr")

        assert ("q", '"Hello" world!') in session.calls[0]["params"]

    def test_cleaning_to_nothing_is_a_validation_error(self, service_for):
        """Test text that cleans to nothing is rejected."""
        service, session = service_for({}, clean_input=True)
        with pytest.raises(ValidationError):
            service.translate(" \n\t ", "fr")
        assert session.calls == []

    def test_context_manager_closes_chain(self):
        """Test leaving the with block closes the chain."""
        chain = Mock(spec=ProviderChain)
        chain.config = None
        with TranslationService(chain=chain):
            pass
        chain.close.assert_called_once()


class TestTranslateText:

    def test_blank_text_is_rejected_without_a_session(self, monkeypatch):
        """Test validation runs before a session is created."""
        monkeypatch.setattr(requests, "Session", Mock(side_effect=AssertionError("no session expected")))
        with pytest.raises(ValidationError) as exc_info:
            translate_text("  ", "te")
        assert exc_info.value.reason == "empty text"


class TestModels:

    def test_request_trims_target(self):
        """Test the target language is trimmed."""
        request = TranslationRequest(text="Hello", target_lang=" te ")
        assert request.target_lang == "te"
        assert request.text == "Hello"

    def test_request_is_frozen(self):
        request = TranslationRequest(text="Hello", target_lang="te")
        with pytest.raises(dataclasses.FrozenInstanceError):
            request.text = "Bye"

    @pytest.mark.parametrize("text,target,reason", [
        ("", "te", "empty text"),
        (None, "te", "empty text"),
        ("Hi", None, "empty target language"),
        ("Hi", "\t", "empty target language"),
    ])
    def test_request_validation(self, text, target, reason):
        """Test each blank field reports its own reason."""
        with pytest.raises(ValidationError) as exc_info:
            TranslationRequest(text=text, target_lang=target)
        assert exc_info.value.reason == reason

    def test_validation_error_is_a_value_error(self):
        assert issubclass(ValidationError, ValueError)

    def test_result_to_dict(self):
        """Test the JSON payload keys."""
        result = TranslationResult(text="హలో", pronunciation="haloo", provider="google-web", source_lang="en")
        assert result.to_dict() == {
            "translatedText": "హలో",
            "detectedSourceLang": "en",
            "pronunciation": "haloo",
            "provider": "google-web",
        }
        assert result.has_pronunciation

    def test_result_without_pronunciation(self):
        result = TranslationResult(text="Bonjour")
        assert result.pronunciation is None
        assert not result.has_pronunciation
