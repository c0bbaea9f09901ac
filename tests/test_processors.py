"""Tests for the named processors."""

import uuid

import pytest

from pii_processors.config.settings import ProcessorSettings
from pii_processors.core import processors
from pii_processors.core.metadata import ColumnMetadata
from pii_processors.core.processors import ProcessorContext, scrub_string
from pii_processors.core.random_source import RandomSource
from pii_processors.errors import InvalidUUIDError, UUIDGenerationError


class TestScrubString:
    """Tests for ScrubString."""

    def test_scrub(self, context):
        assert processors.process_scrub_string(context, None, "hunter2") == "*******"

    @pytest.mark.parametrize(
        "value,expected",
        [("", ""), ("héllo", "*****"), ("日本", "**"), ("a b", "***")],
    )
    def test_counts_code_points(self, value, expected):
        assert scrub_string(value) == expected

    def test_custom_mask(self, store, rng):
        ctx = ProcessorContext.create(ProcessorSettings(mask_char="#"), store=store, rng=rng)

        assert processors.process_scrub_string(ctx, None, "secret") == "######"


class TestIdentity:
    """Tests for Identity."""

    @pytest.mark.parametrize("value", ["", "hunter2", "2018-08-28", "日本", "  padded  "])
    def test_fixed_point(self, context, value):
        assert processors.process_identity(context, None, value) == value


class TestAlphaNumericScrambler:
    """Tests for AlphaNumericScrambler."""

    def test_keyed_is_consistent(self, context, ssn_column):
        first = processors.process_alphanumeric_scrambler(context, ssn_column, "123-45-6789")
        second = processors.process_alphanumeric_scrambler(context, ssn_column, "123-45-6789")

        assert first == second
        assert context.store.alphanumeric_size("public.users.ssn") == 1

    def test_foreign_key_column_shares_mapping(self, context, ssn_column):
        fk_column = ColumnMetadata(
            parent_schema="public",
            parent_table="users",
            parent_column="ssn",
            table_schema="billing",
            table_name="invoices",
            column_name="customer_ssn",
        )

        pk = processors.process_alphanumeric_scrambler(context, ssn_column, "123-45-6789")
        fk = processors.process_alphanumeric_scrambler(context, fk_column, "123-45-6789")

        assert pk == fk

    @pytest.mark.parametrize(
        "metadata",
        [
            None,
            ColumnMetadata(),
            ColumnMetadata(parent_schema="public", parent_table="users"),
            ColumnMetadata(parent_table="users", parent_column="ssn"),
        ],
    )
    def test_unkeyed_bypasses_store(self, context, metadata):
        first = processors.process_alphanumeric_scrambler(context, metadata, "123-45-6789")
        second = processors.process_alphanumeric_scrambler(context, metadata, "123-45-6789")

        assert first != second
        assert len(context.store) == 0

    def test_preserves_shape(self, context, ssn_column):
        result = processors.process_alphanumeric_scrambler(context, ssn_column, "123-45-6789")

        assert len(result) == 11
        assert result[3] == "-" and result[6] == "-"
        assert result.replace("-", "").isdigit()


class TestRandomUUID:
    """Tests for RandomUUID."""

    def test_same_input_same_output(self, context, sample_values):
        first = processors.process_random_uuid(context, None, sample_values["uuid"])
        second = processors.process_random_uuid(context, None, sample_values["uuid"])

        assert first == second
        assert first != sample_values["uuid"]
        assert uuid.UUID(first).version == 4

    def test_mapping_is_global_across_columns(self, context, ssn_column, sample_values):
        first = processors.process_random_uuid(context, None, sample_values["uuid"])
        second = processors.process_random_uuid(context, ssn_column, sample_values["uuid"])

        assert first == second

    def test_equivalent_spellings_share_mapping(self, context, sample_values):
        lower = processors.process_random_uuid(context, None, sample_values["uuid"])
        upper = processors.process_random_uuid(context, None, sample_values["uuid"].upper())
        braced = processors.process_random_uuid(context, None, "{" + sample_values["uuid"] + "}")

        assert lower == upper == braced

    def test_urn_and_compact_spellings_share_mapping(self, context, sample_values):
        canonical = sample_values["uuid"]
        expected = processors.process_random_uuid(context, None, canonical)

        for spelling in (
            "urn:uuid:" + canonical,
            "URN:UUID:" + canonical.upper(),
            canonical.replace("-", ""),
        ):
            assert processors.process_random_uuid(context, None, spelling) == expected
        assert context.store.uuid_size() == 1

    def test_distinct_inputs_distinct_outputs(self, context, sample_values):
        first = processors.process_random_uuid(context, None, sample_values["uuid"])
        second = processors.process_random_uuid(context, None, sample_values["other_uuid"])

        assert first != second
        assert context.store.uuid_size() == 2

    @pytest.mark.parametrize(
        "value",
        [
            "not-a-uuid",
            "",
            "1234",
            # Misplaced hyphens
            "1d8f5e3c8f0e4c43-9a36-2b6a0f4c9c11",
            "1-d-8-f5e3c8f0e4c439a362b6a0f4c9c11",
            "1d8f5e3c_8f0e4c439a362b6a0f4c9c1",
            # Doubled braces
            "{{1d8f5e3c-8f0e-4c43-9a36-2b6a0f4c9c11}}",
            # Fullwidth digit
            "1d8f5e3c-8f0e-4c43-9a36-2b6a0f4c9c1１",
            # Surrounding whitespace
            " 1d8f5e3c-8f0e-4c43-9a36-2b6a0f4c9c11",
        ],
    )
    def test_unparsable_returns_empty(self, context, value):
        assert processors.process_random_uuid(context, None, value) == ""
        assert context.store.uuid_size() == 0

    def test_strict_mode_raises(self, store, rng):
        ctx = ProcessorContext.create(ProcessorSettings(strict_uuid=True), store=store, rng=rng)

        with pytest.raises(InvalidUUIDError) as exc_info:
            processors.process_random_uuid(ctx, None, "not-a-uuid")

        assert exc_info.value.value == "not-a-uuid"

    def test_strict_mode_rejects_misplaced_hyphens(self, store, rng):
        ctx = ProcessorContext.create(ProcessorSettings(strict_uuid=True), store=store, rng=rng)

        with pytest.raises(InvalidUUIDError):
            processors.process_random_uuid(ctx, None, "1-d-8-f5e3c8f0e4c439a362b6a0f4c9c11")
        assert store.uuid_size() == 0

    def test_entropy_failure(self, store, monkeypatch, sample_values):
        def broken_uuid4():
            raise OSError("entropy source unavailable")

        monkeypatch.setattr("pii_processors.core.random_source.uuid.uuid4", broken_uuid4)
        ctx = ProcessorContext.create(ProcessorSettings(), store=store, rng=RandomSource())

        with pytest.raises(UUIDGenerationError):
            processors.process_random_uuid(ctx, None, sample_values["uuid"])
        assert store.uuid_size() == 0


class TestRandomDate:
    """Tests for RandomDate."""

    def test_keeps_year(self, context):
        result = processors.process_random_date(context, None, "2018-08-28")

        assert result.startswith("2018-")


class TestSimilarityProcessors:
    """Tests for the Faker-backed processors."""

    @pytest.mark.parametrize(
        "processor,field_type,threshold",
        [
            (processors.process_street_address, "street_address", 0.5),
            (processors.process_city, "city", 0.5),
            (processors.process_email_address, "email", 0.5),
            (processors.process_first_name, "first_name", 0.4),
            (processors.process_full_name, "full_name", 0.5),
            (processors.process_last_name, "last_name", 0.4),
            (processors.process_phone_number, "phone", 0.5),
            (processors.process_state, "state", 0.4),
            (processors.process_username, "username", 0.4),
            (processors.process_zip, "zip", 0.5),
        ],
    )
    def test_thresholds(self, context, monkeypatch, processor, field_type, threshold):
        calls = []

        def fake_generate(original, threshold_, supplier, *, max_attempts):
            calls.append((original, threshold_, max_attempts, supplier()))
            return "replacement"

        monkeypatch.setattr(processors, "generate_similar", fake_generate)

        assert processor(context, None, "original") == "replacement"
        original, used_threshold, attempts, candidate = calls[0]
        assert original == "original"
        assert used_threshold == threshold
        assert attempts == 100
        assert isinstance(candidate, str) and candidate
        assert field_type in context.supplier.supported_types

    def test_threshold_override(self, store, rng, monkeypatch):
        settings = ProcessorSettings(similarity_thresholds={"FakeCity": 0.9}, similarity_attempts=5)
        ctx = ProcessorContext.create(settings, store=store, rng=rng)
        calls = []

        def fake_generate(original, threshold, supplier, *, max_attempts):
            calls.append((threshold, max_attempts))
            return "x"

        monkeypatch.setattr(processors, "generate_similar", fake_generate)
        processors.process_city(ctx, None, "Springfield")

        assert calls == [(0.9, 5)]

    def test_real_supplier(self, store, rng):
        settings = ProcessorSettings(
            seed=5,
            similarity_thresholds={"FakeEmailAddress": 0.0, "FakeZip": 0.0},
        )
        ctx = ProcessorContext.create(settings, store=store, rng=rng)

        assert "@" in processors.process_email_address(ctx, None, "jane.doe@example.com")
        assert processors.process_zip(ctx, None, "02139")

    def test_names(self):
        assert processors.process_city.__name__ == "process_city"
        assert "0.4" in processors.process_first_name.__doc__
