"""
Tests for the camera factory and composite camera.

Validates:
- Each maker assembles a camera from its own parts
- The picture sequence order is the same for every maker
- Same-contract parts differ only in their label
- Unknown makers fail explicitly
- Cameras and parts are never shared between calls
"""

import dataclasses
from fractions import Fraction

import pytest

from factory_patterns.camera import (
    Camera,
    CameraMaker,
    Film,
    Mirror,
    Shutter,
    UnknownCameraError,
    available_cameras,
    check_exposure,
    create_camera,
    format_exposure,
)
from factory_patterns.camera.parts import (
    CanonFilm,
    CanonMirror,
    CanonShutter,
    NikonFilm,
    NikonMirror,
    NikonShutter,
)
from factory_patterns.selection import UnknownSelectionKeyError
from factory_patterns.trace import RecordingTrace

CANON_SEQUENCE = [
    "Canon film has been engaged",
    "Canon film has been rolled",
    "Canon film has been released",
    "Canon mirror has been opened",
    "Canon shutter speed has been set to 1/125",
    "Canon shutter has been initialized",
    "Canon shutter has been activated",
    "Canon shutter has been released",
    "Canon mirror has been closed",
]


class TestCreateCamera:
    """Tests for create_camera."""

    @pytest.mark.parametrize(
        "maker, name, parts",
        [
            ("canon", "Canon AE-1", (CanonFilm, CanonShutter, CanonMirror)),
            ("NIKON", "Nikon FM2", (NikonFilm, NikonShutter, NikonMirror)),
            (CameraMaker.CANON, "Canon AE-1", (CanonFilm, CanonShutter, CanonMirror)),
        ],
    )
    def test_assembles_maker_parts(self, trace, maker, name, parts):
        """Test each maker's recipe is injected into the camera."""
        camera = create_camera(maker, trace=trace)

        assert isinstance(camera, Camera)
        assert camera.name == name
        assert (type(camera.film), type(camera.shutter), type(camera.mirror)) == parts
        assert isinstance(camera.film, Film)
        assert isinstance(camera.shutter, Shutter)
        assert isinstance(camera.mirror, Mirror)

    @pytest.mark.parametrize("maker", ["LEICA", "", "can", None, "nıkon"])
    def test_unknown_maker_raises(self, maker):
        """Test unknown makers raise instead of returning nothing."""
        with pytest.raises(UnknownCameraError) as excinfo:
            create_camera(maker)

        assert isinstance(excinfo.value, UnknownSelectionKeyError)
        assert excinfo.value.available == ("canon", "nikon")

    def test_fresh_objects_each_call(self, trace):
        """Test cameras and their parts are rebuilt on every call."""
        first = create_camera("canon", trace=trace)
        second = create_camera("canon", trace=trace)

        assert first is not second
        assert first.film is not second.film
        assert first.shutter is not second.shutter
        assert first.mirror is not second.mirror

    def test_custom_shutter_speed(self, trace):
        """Test the exposure time reaches the shutter."""
        create_camera("nikon", trace=trace, shutter_speed=1 / 500).take_picture()
        assert "Nikon shutter speed has been set to 1/500" in trace.messages

    def test_default_trace_writes_stdout(self, capsys):
        """Test output goes to stdout when no sink is given."""
        create_camera("canon").take_picture()
        assert capsys.readouterr().out.splitlines() == CANON_SEQUENCE


def test_available_cameras():
    """Test registered names are sorted lowercase tokens."""
    assert available_cameras() == ("canon", "nikon")


class TestTakePicture:
    """Tests for the composite picture sequence."""

    def test_canon_sequence(self, trace):
        """Test the exact trace of one exposure."""
        create_camera("canon", trace=trace).take_picture()
        assert trace.messages == CANON_SEQUENCE

    @pytest.mark.parametrize("maker", list(CameraMaker))
    def test_sequence_identical_apart_from_label(self, maker):
        """Test every maker produces the same steps in the same order."""
        trace = RecordingTrace()
        create_camera(maker, trace=trace).take_picture()

        label = maker.name.capitalize()
        assert [m.replace(label, "Canon", 1) for m in trace.messages] == CANON_SEQUENCE

    def test_mixed_parts_keep_order(self, trace):
        """Test the order does not depend on which parts are combined."""
        camera = Camera(
            name="Hybrid",
            film=NikonFilm(trace),
            shutter=CanonShutter(trace),
            mirror=NikonMirror(trace),
        )
        camera.take_picture()

        assert [m.split(" has been")[0].split(" speed")[0] for m in trace.messages] == [
            "Nikon film",
            "Nikon film",
            "Nikon film",
            "Nikon mirror",
            "Canon shutter",
            "Canon shutter",
            "Canon shutter",
            "Canon shutter",
            "Nikon mirror",
        ]

    def test_repeated_pictures(self, trace):
        """Test a camera can be used repeatedly with the same output."""
        camera = create_camera("canon", trace=trace)
        camera.take_picture()
        camera.take_picture()
        assert trace.messages == CANON_SEQUENCE * 2


class TestCamera:
    """Tests for Camera itself."""

    def test_immutable(self, trace):
        """Test the assembled camera cannot be altered."""
        camera = create_camera("canon", trace=trace)
        with pytest.raises(dataclasses.FrozenInstanceError):
            camera.film = NikonFilm(trace)

    def test_describe(self, trace):
        """Test the summary names the camera, its parts and exposure."""
        camera = create_camera("nikon", trace=trace, shutter_speed=2.0)
        assert camera.describe() == "Nikon FM2 (NikonFilm, NikonShutter, NikonMirror) @ 2s"

    @pytest.mark.parametrize("contract", [Film, Mirror, Shutter])
    def test_contracts_are_abstract(self, contract):
        """Test contracts cannot be instantiated."""
        with pytest.raises(TypeError):
            contract()


class TestParts:
    """Tests for individual parts."""

    @pytest.mark.parametrize(
        "canon_cls, nikon_cls, ops",
        [
            (CanonFilm, NikonFilm, ["engage", "roll", "release"]),
            (CanonMirror, NikonMirror, ["open", "close"]),
            (CanonShutter, NikonShutter, ["initialize", "activate", "release"]),
        ],
    )
    def test_variants_differ_only_in_label(self, canon_cls, nikon_cls, ops):
        """Test same-contract parts produce the same text apart from the label."""
        canon_trace, nikon_trace = RecordingTrace(), RecordingTrace()
        canon, nikon = canon_cls(canon_trace), nikon_cls(nikon_trace)

        for op in ops:
            getattr(canon, op)()
            getattr(nikon, op)()

        assert len(canon_trace.messages) == len(ops)
        assert [m.replace("Nikon", "Canon") for m in nikon_trace.messages] == canon_trace.messages

    def test_shutter_set_speed_text(self, trace):
        """Test the speed message format."""
        CanonShutter(trace).set_speed(1 / 60)
        assert trace.messages == ["Canon shutter speed has been set to 1/60"]


class TestFormatExposure:
    """Tests for format_exposure."""

    @pytest.mark.parametrize(
        "seconds, expected",
        [(1 / 125, "1/125"), (1 / 4000, "1/4000"), (0.5, "1/2"), (1, "1s"), (2.5, "2.5s")],
    )
    def test_formats(self, seconds, expected):
        """Test dial-style formatting."""
        assert format_exposure(seconds) == expected

    @pytest.mark.parametrize("seconds", [0, -1 / 125, "fast", float("inf")])
    def test_non_positive_rejected(self, seconds):
        """Test non-positive and non-numeric exposures are rejected."""
        with pytest.raises(ValueError):
            format_exposure(seconds)


class TestShutterSpeedValidation:
    """Tests that a camera is only built with a usable exposure time."""

    @pytest.mark.parametrize(
        "speed", [0, -1 / 125, "fast", "1/125", True, float("nan"), float("inf")]
    )
    def test_create_camera_rejects_bad_speed(self, trace, speed):
        """Test bad speeds fail at assembly, before any step is traced."""
        with pytest.raises(ValueError):
            create_camera("canon", trace=trace, shutter_speed=speed)

        assert trace.messages == []

    def test_zero_speed_never_starts_sequence(self, trace):
        """Test a zero speed cannot leave the mirror open mid-sequence."""
        with pytest.raises(ValueError, match="positive"):
            create_camera("canon", trace=trace, shutter_speed=0).take_picture()

        assert trace.messages == []

    def test_direct_construction_validated(self, trace):
        """Test Camera itself checks the speed, not only the factory."""
        with pytest.raises(ValueError):
            Camera(
                name="Broken",
                film=CanonFilm(trace),
                shutter=CanonShutter(trace),
                mirror=CanonMirror(trace),
                shutter_speed=-2,
            )

    def test_fraction_accepted_as_float(self, trace):
        """Test any positive real number is accepted and stored as float."""
        camera = create_camera("nikon", trace=trace, shutter_speed=Fraction(1, 250))

        assert camera.shutter_speed == pytest.approx(0.004)
        assert isinstance(camera.shutter_speed, float)

        camera.take_picture()
        assert len(trace.messages) == 9
        assert trace.messages[-1] == "Nikon mirror has been closed"

    @pytest.mark.parametrize("seconds, expected", [(1, 1.0), (0.5, 0.5), (Fraction(1, 8), 0.125)])
    def test_check_exposure(self, seconds, expected):
        """Test valid exposures come back as floats."""
        assert check_exposure(seconds) == expected
