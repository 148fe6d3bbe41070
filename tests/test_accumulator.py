"""Unit tests for check-in accumulation."""


class TestMerge:
    def test_merge_with_empty_is_identity(self, accumulator, complete_check_in):
        partial = {"energy": 4, "notes": "tired"}

        assert accumulator.merge(partial, {}).record == partial
        assert accumulator.merge(complete_check_in, {}).record == complete_check_in
        assert accumulator.merge({}, {}).record == {}

    def test_incoming_overwrites_prior(self, accumulator):
        for prior_soreness in (0, 3, 9):
            result = accumulator.merge({"soreness": prior_soreness, "energy": 6}, {"soreness": 5})

            assert result.record["soreness"] == 5
            assert result.record["energy"] == 6

    def test_soreness_areas_replaced_not_appended(self, accumulator):
        result = accumulator.merge(
            {"sorenessAreas": ["legs", "back"]},
            {"sorenessAreas": ["shoulders"]},
        )

        assert result.record["sorenessAreas"] == ["shoulders"]

    def test_invalid_union_rejected_prior_unchanged(self, accumulator):
        prior = {"energy": 6}

        result = accumulator.merge(prior, {"stress": 42})

        assert not result.accepted
        assert result.record == prior
        assert result.errors == [{"field": "stress", "message": "must be between 1 and 10"}]

    def test_merge_does_not_mutate_prior(self, accumulator):
        prior = {"energy": 6}
        accumulator.merge(prior, {"stress": 3})
        assert prior == {"energy": 6}


class TestMissingRequired:
    def test_fixed_declaration_order(self, accumulator):
        # Insertion order of the record must not matter
        record = {"stress": 3, "energy": 7}

        assert accumulator.missing_required(record) == ["sleepHours", "sleepQuality", "soreness"]

    def test_empty_record_missing_everything(self, accumulator):
        assert accumulator.missing_required({}) == [
            "sleepHours", "sleepQuality", "energy", "soreness", "stress",
        ]

    def test_zero_counts_as_known(self, accumulator, complete_check_in):
        record = {**complete_check_in, "soreness": 0, "sleepHours": 0}
        assert accumulator.missing_required(record) == []

    def test_optional_fields_never_block(self, accumulator, complete_check_in):
        assert accumulator.is_complete(complete_check_in)
        assert "notes" not in accumulator.missing_required(complete_check_in)

    def test_completion_survives_optional_merges(self, accumulator, complete_check_in):
        record = complete_check_in
        for incoming in ({"notes": "felt good"}, {"sorenessAreas": ["calves"]}, {}):
            record = accumulator.merge(record, incoming).record
            assert accumulator.is_complete(record)


class TestValidateRecord:
    def test_valid_record_has_no_errors(self, accumulator, complete_check_in):
        assert accumulator.validate_record(complete_check_in) == []

    def test_reports_each_bad_field(self, accumulator):
        errors = accumulator.validate_record({"sleepHours": -1, "energy": 2.5})
        fields = [e["field"] for e in errors]

        assert fields == ["sleepHours", "energy"]
