"""
arclayout CLI Integration Tests

Runs the measure and arrange subcommands end to end on an item table and
checks the printed summary and the written placement file.

Run: pytest arclayout/tests/integration/ -v
"""
import math
from argparse import ArgumentParser, ArgumentTypeError, Namespace

import pytest

from arclayout.cli import arrange, measure
from arclayout.cli.options import build_config, parse_dimension, parse_final_dimension
from arclayout.config import CircularLayoutConfig, EllipticalLayoutConfig
from arclayout.io import read_placements


def make_args(items, **overrides):
    """Namespace with every layout option at its command-line default"""
    args = dict(
        items=str(items),
        variant='circular',
        available=[math.inf, math.inf],
        arc_start=None,
        arc_end=None,
        degrees=False,
        exclude_start=False,
        include_end=False,
        uncentred=False,
        partial_ellipse=False,
        halign='center',
        valign='center',
        debug=False,
        output=None,
        final_size=None,
    )
    args.update(overrides)
    return Namespace(**args)


@pytest.fixture
def output_file(tmp_path):
    return tmp_path / "results" / "placements.tsv"


# ============================================================================
# MEASURE
# ============================================================================

@pytest.mark.integration
def test_measure_prints_summary(items_file, capsys):
    """
    Four 24x24 items on a full turn: radius 24, desired 72x72
    """
    measured = measure.run(make_args(items_file))
    out = capsys.readouterr().out
    summary = dict(line.split('\t') for line in out.strip().splitlines())

    assert set(summary) == {'desired_width', 'desired_height', 'radius_x', 'radius_y'}
    assert float(summary['radius_x']) == pytest.approx(24.0)
    assert float(summary['desired_width']) == pytest.approx(72.0)
    assert measured.state.item_count == 4


@pytest.mark.integration
def test_measure_missing_items_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        measure.run(make_args(tmp_path / "absent.tsv"))


# ============================================================================
# ARRANGE
# ============================================================================

@pytest.mark.integration
def test_arrange_writes_placements(items_file, output_file):
    """
    Placement file keeps the item ids and the input order
    """
    path = arrange.run(make_args(items_file, output=str(output_file)))
    assert path == output_file

    placements, metadata = read_placements(path)
    assert placements['id'].tolist() == ['alpha', 'beta', 'gamma', 'delta']
    assert metadata['radius_x'] == pytest.approx(24.0)
    assert metadata['final_width'] == pytest.approx(metadata['desired_width'])

    # every rectangle inside the final size
    assert (placements['x'] >= -1e-6).all()
    assert (placements['y'] >= -1e-6).all()
    assert (placements['x'] + placements['width'] <= metadata['final_width'] + 1e-6).all()
    assert (placements['y'] + placements['height'] <= metadata['final_height'] + 1e-6).all()


@pytest.mark.integration
def test_arrange_with_final_size(items_file, output_file):
    args = make_args(items_file, output=str(output_file), final_size=[200.0, 100.0])
    placements, metadata = read_placements(arrange.run(args))

    assert metadata['final_width'] == 200.0
    assert metadata['final_height'] == 100.0
    centre_x = (placements['x'] + placements['width'] / 2).mean()
    centre_y = (placements['y'] + placements['height'] / 2).mean()
    assert centre_x == pytest.approx(100.0)
    assert centre_y == pytest.approx(50.0)


@pytest.mark.integration
def test_arrange_elliptical_stretched(items_file, output_file):
    """
    Stretched ellipse fills the available box on both axes
    """
    args = make_args(
        items_file,
        output=str(output_file),
        variant='elliptical',
        available=[300.0, 100.0],
        halign='stretch',
        valign='stretch',
    )
    placements, metadata = read_placements(arrange.run(args))

    assert metadata['radius_x'] == pytest.approx(138.0)
    assert metadata['radius_y'] == pytest.approx(38.0)
    assert placements['x'].min() == pytest.approx(0.0, abs=1e-6)
    assert (placements['x'] + placements['width']).max() == pytest.approx(300.0)


@pytest.mark.integration
def test_arrange_half_circle_in_degrees(items_file, output_file):
    """
    Upper half circle, packed: the content is wider than it is tall
    """
    args = make_args(
        items_file,
        output=str(output_file),
        arc_start=0.0,
        arc_end=180.0,
        degrees=True,
        include_end=True,
        uncentred=True,
    )
    _, metadata = read_placements(arrange.run(args))
    assert metadata['desired_width'] > metadata['desired_height']


# ============================================================================
# OPTION HANDLING
# ============================================================================

@pytest.mark.integration
def test_build_config_variants(items_file):
    circular = build_config(make_args(items_file, uncentred=True, exclude_start=True))
    assert isinstance(circular, CircularLayoutConfig)
    assert not circular.origin_at_centre
    assert not circular.arc_start_included

    elliptical = build_config(make_args(items_file, variant='elliptical',
                                        partial_ellipse=True, halign='end'))
    assert isinstance(elliptical, EllipticalLayoutConfig)
    assert not elliptical.include_full_ellipse
    assert elliptical.horizontal_alignment.value == 'end'


@pytest.mark.integration
@pytest.mark.parametrize("text,expected", [
    ("inf", math.inf),
    ("AUTO", math.inf),
    ("120.5", 120.5),
    ("0", 0.0),
])
def test_parse_dimension(text, expected):
    assert parse_dimension(text) == expected


@pytest.mark.integration
@pytest.mark.parametrize("text", ["inf", "auto", "1e999", "-1"])
def test_parse_final_dimension_rejects_unbounded(text):
    with pytest.raises(ArgumentTypeError):
        parse_final_dimension(text)


@pytest.mark.integration
def test_unbounded_final_size_is_an_argument_error(items_file, output_file, capsys):
    """
    argparse reports an unbounded --final-size before any layout runs
    """
    parser = ArgumentParser(prog='arclayout')
    arrange.add_parser(parser.add_subparsers(dest='command'))

    args = parser.parse_args(['arrange', '-i', str(items_file), '-o', str(output_file),
                              '--final-size', '120', '80'])
    assert args.final_size == [120.0, 80.0]

    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args(['arrange', '-i', str(items_file), '-o', str(output_file),
                           '--final-size', 'inf', '80'])
    assert excinfo.value.code == 2
    assert "Final size must be finite" in capsys.readouterr().err
    assert not output_file.exists()
