"""
Unit Tests for ResumeService.

- save overwrites the single resume row
- improve embeds text and section label, trims the result and writes nothing
"""

import pytest

from src.common.error_handling import MalformedResponse, RateLimited, Unauthorized, UserNotFound
from src.services import ResumeService
from tests.helpers.fakes import FakeGenerator


@pytest.fixture
def make_service(gateway, clock):
    def _make(generator=None):
        return ResumeService(gateway, generator, clock=clock)
    return _make


class TestSaveAndGet:

    def test_get_before_save_is_none(self, make_service, new_user):
        assert make_service().get(new_user.subject_id) is None

    def test_save_overwrites(self, make_service, gateway, new_user):
        service = make_service()

        service.save(new_user.subject_id, "# Jane\n\nv1")
        service.save(new_user.subject_id, "# Jane\n\nv2")

        assert service.get(new_user.subject_id).content == "# Jane\n\nv2"
        assert len(gateway.resumes.rows) == 1

    def test_content_stored_verbatim(self, make_service, new_user):
        body = "  ## Experience\n- Led team of 5  \n"
        assert make_service().save(new_user.subject_id, body).content == body

    def test_save_requires_caller(self, make_service):
        with pytest.raises(Unauthorized):
            make_service().save("", "# Jane")

    def test_save_unknown_caller(self, make_service):
        with pytest.raises(UserNotFound):
            make_service().save("auth0|ghost", "# Jane")


class TestImprove:

    def test_prompt_embeds_text_and_section(self, make_service, onboarded_user):
        generator = FakeGenerator("  Led a team of 5 engineers to ship X, cutting latency 40%.\n")
        service = make_service(generator)

        improved = service.improve(onboarded_user.subject_id, "Led team of 5", "work-experience")

        assert improved == "Led a team of 5 engineers to ship X, cutting latency 40%."
        assert "Led team of 5" in generator.prompts[0]
        assert "work-experience" in generator.prompts[0]
        assert "software engineering" in generator.prompts[0]

    def test_improve_does_not_persist(self, make_service, gateway, onboarded_user):
        service = make_service(FakeGenerator("Better text"))

        service.improve(onboarded_user.subject_id, "Led team of 5", "work-experience")

        assert gateway.resumes.rows == {}

    def test_improve_without_industry(self, make_service, new_user):
        generator = FakeGenerator("Better text")

        make_service(generator).improve(new_user.subject_id, "Wrote tests", "projects")

        assert "general" in generator.prompts[0]

    def test_generation_errors_propagate(self, make_service, onboarded_user):
        with pytest.raises(RateLimited):
            make_service(FakeGenerator(RateLimited("quota"))).improve(
                onboarded_user.subject_id, "x", "summary"
            )
        with pytest.raises(MalformedResponse):
            make_service(FakeGenerator(MalformedResponse("empty"))).improve(
                onboarded_user.subject_id, "x", "summary"
            )

    def test_improve_requires_caller(self, make_service):
        generator = FakeGenerator("Better text")
        with pytest.raises(Unauthorized):
            make_service(generator).improve(None, "x", "summary")
        assert generator.calls == 0
