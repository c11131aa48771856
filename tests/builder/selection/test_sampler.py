"""
Unit tests for the sampler.

Scripted random sources pin exact draw sequences. Picks are removed
by swapping the last pool entry into the drawn position, so expected
outputs below follow that pool order.
"""

import random
from collections import Counter

import pytest

from structural_diary.builder.sectioning import partition
from structural_diary.builder.selection import (
    OUTPUT_SEPARATOR,
    OutputLine,
    ScriptedRandom,
    SelectionConfig,
    clamp_quota,
    draw_without_replacement,
    join_output,
    resolve_quota,
    sample,
    sample_lines,
    sample_section,
)
from structural_diary.core.models import Section


@pytest.fixture
def three_sections() -> list[Section]:
    """Sections of sizes [4, 3, 5]."""
    return partition(
        "# A\na1\na2\na3\na4\n"
        "# B\nb1\nb2\nb3\n"
        "# C\nc1\nc2\nc3\nc4\nc5\n"
    )


class TestClampQuota:
    """Tests for clamp_quota()."""

    @pytest.mark.parametrize(
        "quota, available, expected",
        [(2, 5, 2), (7, 5, 5), (-3, 5, 0), (0, 0, 0), (4, 0, 0)],
    )
    def test_clamp_quota(self, quota, available, expected):
        assert clamp_quota(quota, available) == expected


class TestDrawWithoutReplacement:
    """Tests for draw_without_replacement()."""

    def test_draw_when_scripted_then_follows_swap_remove_order(self, scripted):
        # Arrange
        rng = scripted(1, 1, 0)

        # Act
        picked = draw_without_replacement(["a", "b", "c", "d", "e"], 3, rng)

        # Assert
        assert picked == ["b", "e", "a"]
        assert rng.calls == [("randrange", 0, 4), ("randrange", 0, 3), ("randrange", 0, 2)]

    def test_draw_when_last_position_drawn_then_pool_shrinks(self, scripted):
        assert draw_without_replacement(["a", "b", "c"], 2, scripted(2, 1)) == ["c", "b"]

    def test_draw_when_duplicate_text_then_treated_as_distinct(self, scripted):
        # Act
        picked = draw_without_replacement(["Why?", "Why?", "x"], 3, scripted(0, 0, 0))

        # Assert
        assert Counter(picked) == Counter({"Why?": 2, "x": 1})

    def test_draw_when_quota_zero_then_no_draws(self):
        rng = ScriptedRandom([])

        assert draw_without_replacement(["a"], 0, rng) == []
        assert rng.calls == []

    def test_draw_when_quota_exceeds_pool_then_all_in_draw_order(self, scripted):
        # Arrange
        rng = scripted(0, 0, 0)

        # Act
        picked = draw_without_replacement(["a", "b", "c"], 10, rng)

        # Assert
        assert picked == ["a", "c", "b"]
        assert rng.remaining == 0

    def test_draw_does_not_modify_pool(self, scripted):
        pool = ["a", "b", "c"]

        draw_without_replacement(pool, 2, scripted(0, 0))

        assert pool == ["a", "b", "c"]

    @pytest.mark.parametrize("quota", [0, 1, 3, 6])
    def test_draw_when_random_then_distinct_positions(self, quota):
        # Arrange
        pool = [f"line {i}" for i in range(6)]
        rng = random.Random(quota)

        # Act
        picked = draw_without_replacement(pool, quota, rng)

        # Assert
        assert len(picked) == quota
        assert len(set(picked)) == quota
        assert set(picked) <= set(pool)


class TestGlobalMode:
    """Tests for sample() in GLOBAL mode."""

    def test_sample_when_example_document_then_two_distinct_lines(self, example_document):
        # Arrange
        sections = partition(example_document)

        # Act
        lines = sample(sections, SelectionConfig.global_mode(2), random.Random(3))

        # Assert
        assert len(lines) == 2
        assert len(set(lines)) == 2
        assert set(lines) <= {"q1", "q2", "q3", "q4", "q5"}

    def test_sample_when_scripted_then_pools_across_sections(self, example_document, scripted):
        # Pool is [q1, q2, q3, q4, q5]
        lines = sample(partition(example_document), SelectionConfig.global_mode(2), scripted(3, 0))

        assert lines == ["q4", "q1"]

    def test_sample_when_quota_exceeds_pool_then_every_line_once(self, example_document, scripted):
        # Arrange
        rng = scripted(0, 0, 0, 0, 0)

        # Act
        lines = sample(partition(example_document), SelectionConfig.global_mode(10), rng)

        # Assert
        assert lines == ["q1", "q5", "q4", "q3", "q2"]
        assert rng.remaining == 0

    def test_sample_when_quota_zero_then_empty(self, example_document):
        assert sample(partition(example_document), SelectionConfig.global_mode(0), ScriptedRandom([])) == []

    def test_sample_when_headers_requested_then_ignored_in_global_mode(self, example_document):
        # Arrange
        config = SelectionConfig(global_quota=5, include_headers=True)

        # Act
        lines = sample(partition(example_document), config, random.Random(1))

        # Assert
        assert sorted(lines) == ["q1", "q2", "q3", "q4", "q5"]

    def test_sample_when_empty_document_then_empty(self):
        assert sample(partition(""), SelectionConfig.global_mode(5)) == []

    def test_sample_when_no_rng_then_uses_fresh_generator(self, example_document):
        lines = sample(partition(example_document), SelectionConfig.global_mode(3))

        assert len(set(lines)) == 3


class TestTemplateMode:
    """Tests for sample() in TEMPLATE mode."""

    def test_sample_when_scripted_then_exact_output(self, three_sections, scripted):
        # Arrange: A draws 3 then 0, B gets random quota 1 then draws 2, C has quota 0
        rng = scripted(3, 0, 1, 2)
        config = SelectionConfig.from_template("1-2;3-0", include_headers=True)

        # Act
        lines = sample(three_sections, config, rng)

        # Assert
        assert lines == ["# A", "a4", "a1", "# B", "b3", "# C"]
        assert rng.calls[2] == ("randint", 0, 3)
        assert rng.remaining == 0

    def test_sample_when_default_quota_covers_section_then_document_order(self, three_sections, scripted):
        # Arrange
        rng = scripted(3, 0, 3)
        config = SelectionConfig.from_template("1-2;3-0")

        # Act
        lines = sample(three_sections, config, rng)

        # Assert
        assert lines == ["a4", "a1", "b1", "b2", "b3"]
        assert rng.remaining == 0

    def test_sample_when_template_exceeds_section_then_full_section_without_draws(self, three_sections):
        # Arrange
        config = SelectionConfig.from_template("1-10;2-3;3-5")

        # Act
        lines = sample(three_sections, config, ScriptedRandom([]))

        # Assert
        assert lines == [s for section in three_sections for s in section.lines]

    def test_sample_when_template_overrides_then_precedence_holds(self, three_sections):
        # Arrange
        config = SelectionConfig.from_template("1-2;3-0", include_headers=True)
        section_b_counts = Counter()

        for seed in range(300):
            # Act
            lines = sample(three_sections, config, random.Random(seed))

            # Assert
            a_end = lines.index("# B")
            c_start = lines.index("# C")
            assert lines[0] == "# A"
            assert len(lines[1:a_end]) == 2
            assert lines[c_start:] == ["# C"]
            section_b_counts[len(lines[a_end + 1:c_start])] += 1

        assert set(section_b_counts) == {0, 1, 2, 3}

    def test_sample_when_zero_lines_picked_then_heading_still_emitted(self, three_sections):
        config = SelectionConfig.from_template("1-0;2-0;3-0", include_headers=True)

        assert sample(three_sections, config, ScriptedRandom([])) == ["# A", "# B", "# C"]

    def test_sample_when_headers_off_then_only_questions(self, three_sections):
        config = SelectionConfig.from_template("1-1;2-0;3-0")

        lines = sample(three_sections, config, random.Random(5))

        assert len(lines) == 1
        assert lines[0] in three_sections[0].lines

    def test_sample_when_implicit_section_then_no_heading_emitted(self):
        # Arrange
        sections = partition("intro\n# A\nq1")
        config = SelectionConfig.from_template("1-1;2-1", include_headers=True)

        # Act
        lines = sample(sections, config, ScriptedRandom([]))

        # Assert
        assert lines == ["intro", "# A", "q1"]

    def test_sample_when_empty_section_then_no_random_draw(self):
        # Arrange
        sections = partition("# A\n# B\nb1\nb2")
        config = SelectionConfig.from_template("2-0", include_headers=True)

        # Act
        lines = sample(sections, config, ScriptedRandom([]))

        # Assert
        assert lines == ["# A", "# B"]

    def test_sample_when_custom_default_quota_then_used(self, three_sections):
        # Arrange
        config = SelectionConfig.from_template("2-0", default_quota=lambda count, rng: count)

        # Act
        lines = sample(three_sections, config, ScriptedRandom([]))

        # Assert
        assert lines == list(three_sections[0].lines) + list(three_sections[2].lines)

    def test_sample_when_template_mentions_missing_section_then_ignored(self, example_document):
        config = SelectionConfig.from_template("1-2;2-3;9-4")

        lines = sample(partition(example_document), config, ScriptedRandom([]))

        assert lines == ["q1", "q2", "q3", "q4", "q5"]



class TestSampleLines:
    """Tests for sample_lines()."""

    def test_sample_lines_when_heading_text_repeats_as_question_then_tagged_apart(self):
        # Arrange
        sections = partition("# \n#")
        config = SelectionConfig.from_template("1-1", include_headers=True)

        # Act
        entries = sample_lines(sections, config, ScriptedRandom([]))

        # Assert
        assert entries == [OutputLine("#", is_heading=True), OutputLine("#")]

    def test_sample_lines_when_global_mode_then_no_headings(self, example_document, scripted):
        config = SelectionConfig.global_mode(2)

        entries = sample_lines(partition(example_document), config, scripted(3, 0))

        assert entries == [OutputLine("q4"), OutputLine("q1")]

    def test_sample_matches_sample_lines_text(self, three_sections):
        config = SelectionConfig.from_template("1-2", include_headers=True)

        entries = sample_lines(three_sections, config, random.Random(3))
        lines = sample(three_sections, config, random.Random(3))

        assert lines == [entry.text for entry in entries]


class TestResolveQuota:
    """Tests for resolve_quota() and sample_section()."""

    def test_resolve_quota_when_template_entry_then_clamped_to_lines(self):
        section = Section.from_heading("# A", ["q1", "q2"])
        config = SelectionConfig.from_template("1-9")

        assert resolve_quota(1, section, config, ScriptedRandom([])) == 2

    def test_resolve_quota_when_no_entry_then_random_default(self, scripted):
        section = Section.from_heading("# A", ["q1", "q2"])
        config = SelectionConfig.from_template("")

        assert resolve_quota(1, section, config, scripted(2)) == 2

    def test_sample_section_when_under_quota_then_draws(self, scripted):
        section = Section.from_heading("# A", ["q1", "q2", "q3"])

        assert sample_section(section, 1, scripted(2)) == ["q3"]


class TestJoinOutput:
    """Tests for join_output()."""

    def test_join_output_uses_triple_newline(self):
        assert OUTPUT_SEPARATOR == "\n\n\n"
        assert join_output(["q1", "q2"]) == "q1\n\n\nq2"

    def test_join_output_when_empty_then_empty_string(self):
        assert join_output([]) == ""
