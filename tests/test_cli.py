from __future__ import annotations

import json

from geosvgmap.cli import main


def _write_geojson(tmp_path, document) -> str:
    path = tmp_path / "regions.geojson"
    path.write_text(json.dumps(document), encoding="utf-8")
    return str(path)


def test_render_command_writes_svg(tmp_path, two_region_document):
    source = _write_geojson(tmp_path, two_region_document)
    markers = tmp_path / "markers.yaml"
    markers.write_text("- {lat: 45, lng: 20, icon: '*', name: Hub}\n", encoding="utf-8")
    output = tmp_path / "map.svg"

    code = main(
        [
            "render",
            "--geojson", source,
            "--markers", str(markers),
            "--output", str(output),
            "--width", "400",
            "--height", "200",
            "--language", "en",
            "--no-tooltips",
        ]
    )

    assert code == 0
    svg = output.read_text(encoding="utf-8")
    assert svg.startswith("<svg viewBox='0 0 400 200'")
    assert "West Region" not in svg
    assert "<title>Hub</title>" in svg


def test_render_command_uses_config_file(tmp_path, unit_square_document):
    _write_geojson(tmp_path, unit_square_document)
    cfg_path = tmp_path / "geosvgmap.yaml"
    cfg_path.write_text(
        "render: {width: 100, height: 100}\n"
        "paths: {geojson: regions.geojson, output_svg: out/map.svg}\n",
        encoding="utf-8",
    )
    assert main(["render", "--config", str(cfg_path)]) == 0
    svg = (tmp_path / "out" / "map.svg").read_text(encoding="utf-8")
    assert "d='M 0,100 100,100 100,0 0,0 0,100 Z'" in svg


def test_render_command_fails_on_invalid_geojson(tmp_path):
    source = _write_geojson(tmp_path, {"type": "FeatureCollection"})
    assert main(["render", "--geojson", source, "--output", str(tmp_path / "map.svg")]) == 1


def test_render_command_rejects_bad_size(tmp_path, unit_square_document):
    source = _write_geojson(tmp_path, unit_square_document)
    assert main(["render", "--geojson", source, "--width", "0", "--output", "-"]) == 1


def test_bounds_command_prints_json(tmp_path, capsys, two_region_document):
    source = _write_geojson(tmp_path, two_region_document)
    assert main(["bounds", "--geojson", source]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload == {"max_lat": 50.0, "max_lng": 30.0, "min_lat": 40.0, "min_lng": 10.0}


def test_bounds_command_without_source():
    assert main(["bounds"]) == 1


def test_render_command_fails_cleanly_on_malformed_markers(tmp_path, unit_square_document):
    source = _write_geojson(tmp_path, unit_square_document)
    markers = tmp_path / "markers.yaml"
    markers.write_text("- {lat: 1, lng: [\n", encoding="utf-8")
    code = main(["render", "--geojson", source, "--markers", str(markers), "--output", str(tmp_path / "m.svg")])
    assert code == 1
    assert not (tmp_path / "m.svg").exists()


def test_bounds_command_emits_strict_json_for_empty_document(tmp_path, capsys):
    source = _write_geojson(tmp_path, {"type": "FeatureCollection", "features": []})
    assert main(["bounds", "--geojson", source]) == 0
    out = capsys.readouterr().out

    def _reject(token):
        raise ValueError(token)

    payload = json.loads(out, parse_constant=_reject)
    assert payload == {"max_lat": None, "max_lng": None, "min_lat": None, "min_lng": None}
