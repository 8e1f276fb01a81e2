from __future__ import annotations

from datetime import date

import pytest
from pydantic import ValidationError

from tutormatch.catalog import default_languages
from tutormatch.schemas import JobPosting, LanguageRecord, ScheduledBlock, TutorLanguage, TutorProfile


def test_job_posting_defaults():
    posting = JobPosting(posting_id="P-1")

    assert posting.status == "published"
    assert posting.is_open
    assert posting.modality == "virtual"
    assert posting.required_languages == []
    assert posting.target_language is None
    assert posting.max_hourly_rate is None


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("presencial", "in_person"), ("In-Person", "in_person"), ("hibrida", "hybrid"), ("online", "virtual")],
)
def test_job_posting_normalizes_modality(raw: str, expected: str):
    assert JobPosting(posting_id="P-1", modality=raw).modality == expected


def test_job_posting_rejects_unknown_modality():
    with pytest.raises(ValidationError):
        JobPosting(posting_id="P-1", modality="telepathic")


def test_job_posting_parses_schedule_fields():
    posting = JobPosting(
        posting_id="P-1",
        class_date="2024-06-10",
        start_time="09:00",
        total_duration_minutes=90,
        status="closed",
    )

    assert posting.class_date == date(2024, 6, 10)
    assert not posting.is_open


def test_records_are_immutable():
    tutor = TutorProfile(tutor_id="T-1", hourly_rate=20)

    with pytest.raises(ValidationError):
        tutor.hourly_rate = 10  # type: ignore[misc]


def test_language_record_normalizes_code_and_lists_names():
    record = LanguageRecord(code=" PT ", name="Portuguese", localized_names={"es": "Portugués"})

    assert record.code == "pt"
    assert record.names() == ["Portuguese", "Portugués"]


def test_language_record_requires_code():
    with pytest.raises(ValidationError):
        LanguageRecord(code="  ", name="Nothing")


def test_tutor_language_defaults_to_teaching():
    entry = TutorLanguage(tutor_id="T-1", language="en")

    assert entry.kind == "teaching"
    assert entry.level is None


def test_scheduled_block_requires_positive_duration():
    with pytest.raises(ValidationError):
        ScheduledBlock(
            block_id="B-1",
            tutor_id="T-1",
            class_date="2024-06-10",
            start_time="09:00",
            duration_minutes=0,
        )


def test_scheduled_block_active_statuses():
    block = ScheduledBlock(
        block_id="B-1",
        tutor_id="T-1",
        class_date="2024-06-10",
        start_time="09:00",
        duration_minutes=30,
    )

    assert block.is_active
    assert not block.model_copy(update={"status": "cancelled"}).is_active


def test_default_catalogue():
    languages = default_languages()

    assert len(languages) == 20
    assert len({record.code for record in languages}) == 20
    spanish = next(record for record in languages if record.code == "es")
    assert spanish.localized_names == {"en": "Spanish", "es": "Español"}
