from __future__ import annotations

import io
import json

from watson_cli import __version__
from watson_cli.cli.main import main
from watson_cli.exporter import PluginCommand, export_descriptors, plugin_metadata
from watson_cli.services import get_registry


def test_descriptor_names_follow_parent_rule() -> None:
    registry = get_registry()
    descriptors = export_descriptors(registry)
    entries = registry.enumerate()

    assert descriptors[0] == PluginCommand(
        namespace="watson",
        name="watson",
        description=registry.root().long_help,
        usage="watson [service] [operation]",
    )
    assert len(descriptors) == len(entries) + 1
    for descriptor, (service, operation) in zip(descriptors[1:], entries):
        assert descriptor.namespace == "watson"
        if operation is None:
            assert descriptor.name == service.id
            assert descriptor.usage == f"{service.id} [operation]"
            assert descriptor.aliases == service.aliases
        else:
            assert descriptor.name == f"{service.id} {operation.verb}"
            assert descriptor.usage == operation.verb


def test_descriptor_description_prefers_long_help() -> None:
    descriptors = {d.name: d for d in export_descriptors(get_registry())}
    classify = get_registry().resolve("nlc-v1").operation("classify")
    assert descriptors["natural-language-classifier-v1 classify"].description == classify.long_help
    assert descriptors["natural-language-classifier-v1"].aliases == ("nlc-v1",)


def test_plugin_metadata_shape() -> None:
    metadata = plugin_metadata(get_registry())
    assert metadata["name"] == "watson"
    assert metadata["version"] == __version__
    assert metadata["namespaces"][0]["name"] == "watson"
    assert metadata["commands"][0]["name"] == "watson"
    lt = next(c for c in metadata["commands"] if c["name"] == "language-translator-v3")
    assert lt["aliases"] == ["lt-v3"]


def test_plugin_metadata_flag_prints_json(tmp_path, monkeypatch) -> None:
    monkeypatch.setattr("watson_cli.cli.config.DEFAULT_CONFIG_PATH", tmp_path / "missing.toml")
    out = io.StringIO()
    err = io.StringIO()

    rc = main(["--plugin-metadata"], stdout=out, stderr=err)

    assert rc == 0
    payload = json.loads(out.getvalue())
    assert payload == json.loads(json.dumps(plugin_metadata(get_registry())))
    assert err.getvalue() == ""
