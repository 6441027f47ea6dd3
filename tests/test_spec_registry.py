import json

import pytest
from ggb_specs import CatalogueError, CommandSignature, SpecRegistry, get_spec_registry
from ggb_specs.registry import parse_parameter, split_parameters, split_top_level_signatures

RECORDS = [
    {
        "signature": "SetValue( <Object>, <Object> ) | SetValue( <List>, <Number>, <Object> )",
        "commandBase": "SetValue",
        "description": "Sets a value",
        "examples": [{"description": "slider", "command": "SetValue(a, 1)"}],
    },
    {
        "signature": "Polygon( <Point>, ..., <Point> ) | Polygon( <List of Points> )",
        "commandBase": "Polygon",
        "description": "Creates a polygon",
    },
]


@pytest.fixture
def specs():
    return SpecRegistry.from_records(RECORDS)


def test_overloads_in_registration_order(specs):
    overloads = specs.get_command_specs("SetValue")

    assert len(overloads) == 2
    assert [p.type for p in overloads[0].parameters] == ["Object", "Object"]
    assert [p.type for p in overloads[1].parameters] == ["List", "Number", "Object"]
    assert overloads[1].signature == "SetValue( <List>, <Number>, <Object> )"
    assert overloads[0].description == "Sets a value"
    assert overloads[0].examples[0].command == "SetValue(a, 1)"


def test_lookup_is_case_sensitive(specs):
    assert specs.has_command("SetValue")
    assert not specs.has_command("setvalue")
    assert specs.get_command_specs("setvalue") is None


def test_all_command_names(specs):
    assert specs.get_all_command_names() == ["SetValue", "Polygon"]
    assert specs.command_count == 2


def test_find_best_match(specs):
    assert len(specs.find_best_match("SetValue", 3).parameters) == 3
    assert len(specs.find_best_match("SetValue", 2).parameters) == 2
    # no overload with 7 parameters: fall back to the first one
    assert specs.find_best_match("SetValue", 7) is specs.get_command_specs("SetValue")[0]
    assert specs.find_best_match("Nope", 1) is None


def test_variadic_overload(specs):
    spec = specs.find_best_match("Polygon", 3)

    assert [p.type for p in spec.parameters] == ["Point", "any", "Point"]
    assert spec.parameters[1].optional
    assert spec.required_count == 2
    assert spec.total_count == 3


def test_get_command_description(specs):
    assert specs.get_command_description("Polygon") == "Creates a polygon"
    assert specs.get_command_description("Nope") is None


def test_registry_is_read_only(specs):
    overloads = specs.get_command_specs("SetValue")
    assert isinstance(overloads, tuple)
    with pytest.raises(AttributeError):
        overloads[0].name = "Other"
    names = specs.get_all_command_names()
    names.append("Injected")
    assert not specs.has_command("Injected")


def test_split_top_level_signatures():
    parts = split_top_level_signatures("A( <x|y> ) | B( ) | ")
    assert [p.strip() for p in parts] == ["A( <x|y> )", "B( )"]


def test_split_parameters():
    assert split_parameters("<Object>, <Number 0|1>, <\"Color\">") == [
        "<Object>",
        "<Number 0|1>",
        '<"Color">',
    ]
    assert split_parameters("<Point, or Line>, <Number>") == ["<Point, or Line>", "<Number>"]


def test_parse_parameter():
    assert parse_parameter("<Object>").type == "Object"
    assert parse_parameter('<"Color">').type == "String"

    variadic = parse_parameter("...")
    assert variadic.type == "any"
    assert variadic.optional

    style = parse_parameter("<Number 0|1|2|3|4>")
    assert style.type == "Number"
    assert style.alternatives == ("0", "1", "2", "3", "4")

    either = parse_parameter("<Point|Line>")
    assert either.type == "Point"
    assert either.accepted_types() == ("Point", "Line")

    assert parse_parameter("<>") is None


def test_signature_without_parameters():
    specs = SpecRegistry.from_records(
        [{"signature": "ZoomIn( ) | ZoomIn( <Factor> )", "commandBase": "ZoomIn"}]
    )
    overloads = specs.get_command_specs("ZoomIn")
    assert overloads[0].parameters == ()
    assert specs.find_best_match("ZoomIn", 0) is overloads[0]


def test_model_accepts_field_name():
    sig = CommandSignature(signature="A( <Object> )", command_base="A")
    assert SpecRegistry([sig]).has_command("A")


def test_invalid_records():
    with pytest.raises(CatalogueError):
        SpecRegistry.from_records([{"commandBase": "NoSignature"}])
    with pytest.raises(CatalogueError):
        SpecRegistry.from_records([{"signature": "A()", "commandBase": ""}])


def test_from_json(tmp_path):
    path = tmp_path / "catalogue.json"
    path.write_text(json.dumps(RECORDS), encoding="utf-8")
    assert SpecRegistry.from_json(path).has_command("Polygon")

    broken = tmp_path / "broken.json"
    broken.write_text("[{", encoding="utf-8")
    with pytest.raises(CatalogueError):
        SpecRegistry.from_json(broken)
    with pytest.raises(CatalogueError):
        SpecRegistry.from_json(tmp_path / "missing.json")


def test_bundled_catalogue():
    specs = get_spec_registry()

    assert specs is get_spec_registry()
    assert specs.command_count > 50
    for name in ("SetValue", "Point", "Distance", "SetColor", "Circle", "Polygon", "Sequence"):
        assert specs.has_command(name)

    set_color = specs.get_command_specs("SetColor")
    assert [p.type for p in set_color[0].parameters] == ["Object", "String"]
    assert len(set_color[1].parameters) == 4

    line_style = specs.find_best_match("SetLineStyle", 2)
    assert line_style.parameters[1].alternatives == ("0", "1", "2", "3", "4")
