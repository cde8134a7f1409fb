"""Tests for the pyactr script assembler."""
import pytest
from dataclasses import replace
from datetime import datetime
from unittest.mock import patch

from actrgen.emitter.script import (
    ScriptAssembler,
    class_name_for,
    model_init_args,
    title_case,
)
from actrgen.emitter.writer import ScriptWriter
from actrgen.errors import ConfigurationError, UnsupportedStatementError
from actrgen.model import (
    Buffer,
    Initializer,
    Memory,
    Model,
    Pattern,
    Production,
    SetStatement,
)

from conftest import ident, num, slot

GENERATED_AT = datetime(2026, 1, 2, 3, 4, 5)


def generate(model, initial_goal=None) -> str:
    writer = ScriptWriter()
    ScriptAssembler(model).write(writer, initial_goal, GENERATED_AT)
    return writer.contents()


def goal_pattern(count_model, start="3") -> Pattern:
    chunk = count_model.lookup_chunk("countFrom")
    return Pattern(chunk, (slot(num(start)), slot(num("5")), slot(ident("starting"))))


class TestModelInitArgs:
    """Tests for the model constructor arguments."""

    def test_no_memory_settings(self, bare_model):
        """Only subsymbolic when nothing is configured."""
        assert model_init_args(bare_model) == ["subsymbolic=True"]

    def test_latency_only(self, bare_model):
        """Threshold is omitted, not defaulted."""
        model = replace(bare_model, memory=Memory(latency=0.5))
        assert ", ".join(model_init_args(model)) == "subsymbolic=True, latency_factor=0.5"

    def test_threshold_only(self, bare_model):
        """Latency is omitted when unset."""
        model = replace(bare_model, memory=Memory(threshold=-2.0))
        assert model_init_args(model) == ["subsymbolic=True", "retrieval_threshold=-2"]

    def test_both_in_fixed_order(self, bare_model):
        """latency_factor always precedes retrieval_threshold."""
        model = replace(bare_model, memory=Memory(latency=0.2, threshold=0.1))
        assert model_init_args(model) == [
            "subsymbolic=True",
            "latency_factor=0.2",
            "retrieval_threshold=0.1",
        ]

    def test_zero_is_not_absent(self, bare_model):
        """A zero latency is still emitted."""
        model = replace(bare_model, memory=Memory(latency=0.0))
        assert model_init_args(model) == ["subsymbolic=True", "latency_factor=0"]


class TestClassName:
    """Tests for generated class names."""

    def test_title_case(self):
        """First letter of each word is upper-cased, the rest untouched."""
        assert title_case("count") == "Count"
        assert title_case("addition model") == "Addition Model"
        assert title_case("myModel") == "MyModel"
        assert title_case("my_model") == "My_model"

    def test_class_name(self, count_model):
        """Class names carry the actrgen prefix."""
        assert class_name_for(count_model) == "actrgen_pyactr_Count"


class TestScriptAssembler:
    """Tests for full script generation."""

    def test_missing_name(self, bare_model):
        """A model without a name is rejected before any output."""
        with pytest.raises(ConfigurationError, match="missing name"):
            ScriptAssembler(replace(bare_model, name=""))

    @pytest.mark.parametrize("name", ["addition model", "count-to-five", "count.v2"])
    def test_name_must_be_identifier(self, bare_model, name):
        """Names that cannot form a Python variable are rejected."""
        with pytest.raises(ConfigurationError, match="not a valid identifier"):
            ScriptAssembler(replace(bare_model, name=name))

    def test_multiline_model_description(self, count_model):
        """Every description line stays inside a comment."""
        model = replace(count_model, description="Counts things.\nSee the tutorial for details.")
        code = generate(model)
        assert "# Counts things.\n# See the tutorial for details.\n\nimport pyactr as actr\n" in code
        compile(code, "count.py", "exec")

    def test_multiline_production_description(self, count_model):
        """Production descriptions are commented line by line."""
        start = replace(count_model.productions[0], description="Starts things off\n\nthen recalls")
        code = generate(replace(count_model, productions=(start,)))
        assert "# Starts things off\n# \n# then recalls\nactrgen_pyactr_Count.productionstring(name='start'" in code
        compile(code, "count.py", "exec")

    def test_header(self, count_model):
        """Header carries the timestamp, warning and description."""
        code = generate(count_model)
        lines = code.splitlines()
        assert lines[0] == "# This file is generated by actrgen 0.3.0 2026-01-02 03:04:05"
        assert "# *** This is a generated file. Any changes may be overwritten." in lines
        assert "# This is a model which adds numbers." in lines

    def test_constructor_line(self, count_model):
        """Count model constructor uses the latency only."""
        code = generate(count_model)
        assert "actrgen_pyactr_Count = actr.ACTRModel(subsymbolic=True, latency_factor=0.5)\n" in code

    def test_chunk_types_skip_internal(self, count_model):
        """Internal chunks are never declared."""
        code = generate(count_model)
        assert "actr.chunktype('count', 'first, second')" in code
        assert "actr.chunktype('countFrom', 'start, end, count')" in code
        assert "_status" not in code

    def test_section_order(self, count_model):
        """Sections appear in the fixed order."""
        code = generate(count_model, goal_pattern(count_model))
        markers = [
            "# This file is generated",
            "import pyactr as actr",
            "actr.ACTRModel(",
            "actr.chunktype(",
            "dm = actrgen_pyactr_Count.decmem",
            "goal = actrgen_pyactr_Count.set_goal('goal')",
            "initial_goal = actr.chunkstring(string='''",
            "dm.add(actr.chunkstring(string='''",
            "# Starts things off",
            "actrgen_pyactr_Count.productionstring(name='start', string='''",
            "actrgen_pyactr_Count.productionstring(name='stop', string='''",
            "if __name__ == '__main__':",
        ]
        positions = [code.index(marker) for marker in markers]
        assert positions == sorted(positions)

    def test_initializers(self, count_model):
        """Each initializer becomes an add statement."""
        code = generate(count_model)
        assert code.count("dm.add(actr.chunkstring(string='''") == 5
        assert "dm.add(actr.chunkstring(string='''\n\tisa\tcount\n\tfirst\t0\n\tsecond\t1\n'''))\n" in code
        assert ("goal.add(actr.chunkstring(string='''\n\tisa\tcountFrom\n\tstart\t2\n"
                "\tend\t5\n\tcount\t\"starting\"\n'''))\n") in code

    def test_initial_goal_overrides_goal_initializer(self, count_model):
        """An explicit goal suppresses the goal initializer only."""
        code = generate(count_model, goal_pattern(count_model))
        assert "goal.add(actr.chunkstring(" not in code
        assert code.count("dm.add(actr.chunkstring(string='''") == 5
        assert ("initial_goal = actr.chunkstring(string='''\n\tisa\tcountFrom\n\tstart\t3\n"
                "\tend\t5\n\tcount\t\"starting\"\n''')\ngoal.add(initial_goal)\n") in code

    def test_other_buffer_initializers_kept(self, count_model):
        """Initializers for other buffers survive an explicit goal."""
        retrieval = count_model.lookup_buffer("retrieval")
        chunk = count_model.lookup_chunk("count")
        extra = Initializer(Pattern(chunk, (slot(num("7")), slot(num("8")))), retrieval)
        model = replace(count_model, initializers=count_model.initializers + (extra,))
        code = generate(model, goal_pattern(model))
        assert "retrieval.add(actr.chunkstring(string='''\n\tisa\tcount\n\tfirst\t7\n\tsecond\t8\n'''))" in code

    def test_imaginal(self, count_model):
        """Imaginal buffer alias carries its delay."""
        model = replace(count_model, buffers=count_model.buffers + (Buffer("imaginal", imaginal_delay=0.2),))
        code = generate(model, goal_pattern(model))
        line = 'imaginal = actrgen_pyactr_Count.set_goal(name="imaginal", delay=0.2)'
        assert line in code
        assert code.index("goal.add(initial_goal)") < code.index(line) < code.index("dm.add(")

    def test_no_imaginal(self, count_model):
        """No imaginal alias unless the model declares one."""
        assert "imaginal" not in generate(count_model)

    def test_production_block(self, count_model):
        """Production blocks: description, header, matches, separator, actions."""
        code = generate(count_model)
        expected = (
            "# Starts things off\n"
            "actrgen_pyactr_Count.productionstring(name='start', string='''\n"
            "\t=goal>\n"
            "\t\tisa\tcountFrom\n"
            "\t\tstart\t=start\n"
            "\t\tend\t=end\n"
            "\t\tcount\t\"starting\"\n"
            "\t==>\n"
            "\t+retrieval>\n"
            "\t\tisa\tcount\n"
            "\t\tfirst\t=start\n"
            "\t=goal>\n"
            "\t\tisa\tcountFrom\n"
            "\t\tcount\t\"counting\"\n"
            "''')\n\n"
        )
        assert expected in code

    def test_production_with_memory_and_negation(self, count_model):
        """Negated variables and memory matches render correctly."""
        code = generate(count_model)
        expected = (
            "actrgen_pyactr_Count.productionstring(name='increment', string='''\n"
            "\t=goal>\n"
            "\t\tisa\tcountFrom\n"
            "\t\tstart\t=x\n"
            "\t\tend\t~=x\n"
            "\t\tcount\t\"counting\"\n"
            "\t=retrieval>\n"
            "\t\tisa\tcount\n"
            "\t==>\n"
        )
        assert expected in code

    def test_status_matches(self, count_model):
        """Status queries use the buffer and state keys."""
        code = generate(count_model)
        assert "\t?retrieval>\n\t\tbuffer\tfull\n" in code
        assert "\t?retrieval>\n\t\tstate\terror\n" in code
        assert "\t~goal>\n" in code

    def test_production_without_description(self, count_model):
        """No comment line when a production has no description."""
        code = generate(count_model)
        index = code.index("actrgen_pyactr_Count.productionstring(name='stop'")
        assert code[:index].endswith("''')\n\n")

    def test_harness(self, count_model):
        """Execution harness prints the goal only when it is full."""
        code = generate(count_model)
        assert code.endswith(
            "if __name__ == '__main__':\n"
            "\tsim = actrgen_pyactr_Count.simulation()\n"
            "\tsim.run()\n"
            "\tif goal.test_buffer('full') == True:\n"
            "\t\tprint( 'final goal: ' + str(goal.pop()) )\n"
        )

    def test_deterministic(self, count_model):
        """Same model and timestamp give identical output."""
        assert generate(count_model) == generate(count_model)


class TestWriteFile:
    """Tests for file-backed generation."""

    def test_writes_file(self, count_model, tmp_path):
        """The file holds exactly the returned code."""
        path = tmp_path / "count.py"
        code = ScriptAssembler(count_model).write_file(path, generated_at=GENERATED_AT)
        assert path.read_text() == code
        assert code.startswith("# This file is generated by actrgen")

    def test_failure_leaves_no_file(self, count_model, tmp_path):
        """An emission error removes the partial script."""
        bad = Production("bad", statements=(SetStatement(count_model.lookup_buffer("goal")),))
        model = replace(count_model, productions=(bad,))
        path = tmp_path / "bad.py"
        with pytest.raises(UnsupportedStatementError):
            ScriptAssembler(model).write_file(path)
        assert not path.exists()

    def test_io_error_mid_write_leaves_no_file(self, count_model, tmp_path):
        """A write failure after the header removes the partial script."""
        path = tmp_path / "count.py"
        with patch("actrgen.emitter.script.emit_statement", side_effect=OSError("disk full")):
            with pytest.raises(OSError, match="disk full"):
                ScriptAssembler(count_model).write_file(path)
        assert not path.exists()

    def test_unexpected_error_leaves_no_file(self, count_model, tmp_path):
        """Non-actrgen errors also remove the partial script and propagate unchanged."""
        path = tmp_path / "count.py"
        with patch("actrgen.emitter.script.emit_statement", side_effect=TypeError("unsupported statement")):
            with pytest.raises(TypeError, match="unsupported statement"):
                ScriptAssembler(count_model).write_file(path)
        assert not path.exists()

    def test_missing_directory(self, count_model, tmp_path):
        """I/O errors propagate unchanged."""
        with pytest.raises(FileNotFoundError):
            ScriptAssembler(count_model).write_file(tmp_path / "nope" / "count.py")
