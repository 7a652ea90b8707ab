import pytest

from streamreducer.core import (ReducerConfig, ReducerRunConfig, GeographicMetric,
                                PlanarMetric)


def test_default_config():
    cfg = ReducerConfig()
    assert cfg.cfg['reducer']['capacity'] == 10
    assert cfg.cfg['reducer']['allowed_error'] == 2.0
    assert cfg.cfg['reducer']['metric'] == 'planar'

    r = cfg.makeReducer()
    assert r.capacity == 10
    assert r.allowedError == 2.0
    assert isinstance(r.metric, PlanarMetric)


def test_read_config(tmp_path):
    fname = tmp_path / 'reducer.cfg'
    fname.write_text('[reducer]\ncapacity = 20\nallowed_error = 250\nmetric = geographic\n')

    cfg = ReducerConfig()
    cfg.readCfg(str(fname))
    assert cfg.cfg['reducer']['capacity'] == 20

    seen = []
    r = cfg.makeReducer(retained=seen.append)
    assert r.capacity == 20
    assert r.allowedError == 250.
    assert isinstance(r.metric, GeographicMetric)
    r.addPoint(43.45, -79.72)
    assert len(seen) == 1


def test_missing_config_file(tmp_path):
    cfg = ReducerConfig()
    with pytest.raises(RuntimeError):
        cfg.readCfg(str(tmp_path / 'nothere.cfg'))


def test_invalid_config_file(tmp_path):
    fname = tmp_path / 'reducer.cfg'
    fname.write_text('[reducer]\ncapacity = many\n')
    cfg = ReducerConfig()
    with pytest.raises(RuntimeError):
        cfg.readCfg(str(fname))


def test_run_config_defaults():
    run = ReducerRunConfig([])
    assert run.cfg['config'] is None
    assert run.cfg['logging']['debug'] is False
    assert run.cfg['input']['filename'] is None
    assert run.cfg['input']['format'] == 'scalar'
    assert run.cfg['reducer']['capacity'] is None


def test_run_config_overrides():
    run = ReducerRunConfig(['speed.csv', '-n', '20', '-e', '0.5', '-o', 'out.csv', '-d'])
    assert run.cfg['input']['filename'] == 'speed.csv'
    assert run.cfg['output']['filename'] == 'out.csv'
    assert run.cfg['logging']['debug'] is True

    cfg = ReducerConfig()
    run.applyOverrides(cfg)
    assert cfg.cfg['reducer']['capacity'] == 20
    assert cfg.cfg['reducer']['allowed_error'] == 0.5
    assert cfg.cfg['reducer']['metric'] == 'planar'


def test_run_config_gps():
    run = ReducerRunConfig(['track.csv', '-g'])
    assert run.cfg['input']['format'] == 'gps'
    cfg = ReducerConfig()
    run.applyOverrides(cfg)
    assert cfg.cfg['reducer']['metric'] == 'geographic'


def test_run_config_file(tmp_path):
    fname = tmp_path / 'run.cfg'
    fname.write_text('[input]\nformat = gps\n[reducer]\nallowed_error = 250\n')
    run = ReducerRunConfig(['-r', str(fname)])
    assert run.cfg['input']['format'] == 'gps'
    assert run.cfg['reducer']['allowed_error'] == 250.
