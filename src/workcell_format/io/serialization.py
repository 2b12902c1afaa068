"""JSON form of workcell documents.

Every record is written as a JSON object of its fields, leaving out the
fields that hold their default value; reading fills them back in. Variants
are externally tagged, e.g. ``{"pose3d": {...}}`` for an anchor or
``"fixed"`` for joint properties without payload. Entity maps are keyed by
the decimal string of their ids.

Malformed documents surface as the errors of the JSON layer
(``json.JSONDecodeError``, ``KeyError``, ``TypeError`` or ``ValueError``).
"""

import dataclasses
import json
from typing import Any, Callable, Dict, Mapping, TextIO, Union

from workcell_format.core.geometry import (
    Box,
    Capsule,
    Cylinder,
    Local,
    Mesh,
    Package,
    Sphere,
    WorkcellModel,
)
from workcell_format.core.inertial import Inertia, Moment
from workcell_format.core.joint import (
    AsymmetricLimit,
    Continuous,
    Fixed,
    Joint,
    JointAxis,
    JointLimits,
    NoLimit,
    Prismatic,
    Revolute,
    SymmetricLimit,
)
from workcell_format.core.pose import (
    Deg,
    EulerExtrinsicXYZ,
    Pose,
    Pose3D,
    Quat,
    Rad,
    Translate2D,
    Translate3D,
    Yaw,
)
from workcell_format.core.tree import Parented
from workcell_format.core.workcell import Frame, Workcell

Json = Any
Codec = Callable[[Any], Json]


def _identity(value):
    return value


def _vector(value) -> Json:
    return list(value)


def _field_default(field: dataclasses.Field):
    if field.default is not dataclasses.MISSING:
        return field.default
    if field.default_factory is not dataclasses.MISSING:
        return field.default_factory()
    return dataclasses.MISSING


def _encode_record(record, encoders: Mapping[str, Codec] = None) -> Dict[str, Json]:
    """Encode the fields of a record, skipping the ones at their default."""
    encoders = encoders or {}
    out = {}
    for field in dataclasses.fields(record):
        value = getattr(record, field.name)
        if value == _field_default(field):
            continue
        out[field.name] = encoders.get(field.name, _identity)(value)
    return out


def _decode_record(cls, data: Mapping[str, Json], decoders: Mapping[str, Codec] = None):
    """Build a record from its encoded fields, missing fields take their default."""
    decoders = decoders or {}
    kwargs = {}
    for field in dataclasses.fields(cls):
        if field.name in data:
            kwargs[field.name] = decoders.get(field.name, _identity)(data[field.name])
    return cls(**kwargs)


def _single_tag(data: Mapping[str, Json], kind: str):
    if not isinstance(data, Mapping) or len(data) != 1:
        raise ValueError(f"Expected a single tagged {kind}, found {data!r}")
    return next(iter(data.items()))


# Poses


def _encode_angle(angle) -> Json:
    if isinstance(angle, Rad):
        return {"rad": angle.value}
    if isinstance(angle, Deg):
        return {"deg": angle.value}
    raise TypeError(f"Unknown angle {angle!r}")


def _decode_angle(data: Json):
    tag, value = _single_tag(data, "angle")
    if tag == "rad":
        return Rad(float(value))
    if tag == "deg":
        return Deg(float(value))
    raise ValueError(f"Unknown angle unit '{tag}'")


def _encode_rotation(rot) -> Json:
    if isinstance(rot, Yaw):
        return {"yaw": _encode_angle(rot.angle)}
    if isinstance(rot, EulerExtrinsicXYZ):
        return {"euler_xyz": [_encode_angle(a) for a in rot.angles]}
    if isinstance(rot, Quat):
        return {"quat": list(rot.wxyz)}
    raise TypeError(f"Unknown rotation {rot!r}")


def _decode_rotation(data: Json):
    tag, value = _single_tag(data, "rotation")
    if tag == "yaw":
        return Yaw(_decode_angle(value))
    if tag == "euler_xyz":
        return EulerExtrinsicXYZ(tuple(_decode_angle(a) for a in value))
    if tag == "quat":
        return Quat(tuple(float(v) for v in value))
    raise ValueError(f"Unknown rotation '{tag}'")


_POSE_ENCODERS = {"trans": _vector, "rot": _encode_rotation}
_POSE_DECODERS = {"trans": tuple, "rot": _decode_rotation}


def _encode_pose(pose: Pose) -> Json:
    return _encode_record(pose, _POSE_ENCODERS)


def _decode_pose(data: Json) -> Pose:
    return _decode_record(Pose, data, _POSE_DECODERS)


def _encode_anchor(anchor) -> Json:
    if isinstance(anchor, Pose3D):
        return {"pose3d": _encode_pose(anchor.pose)}
    if isinstance(anchor, Translate3D):
        return {"translate3d": list(anchor.xyz)}
    if isinstance(anchor, Translate2D):
        return {"translate2d": list(anchor.xy)}
    raise TypeError(f"Unknown anchor {anchor!r}")


def _decode_anchor(data: Json):
    tag, value = _single_tag(data, "anchor")
    if tag == "pose3d":
        return Pose3D(_decode_pose(value))
    if tag == "translate3d":
        return Translate3D(tuple(value))
    if tag == "translate2d":
        return Translate2D(tuple(value))
    raise ValueError(f"Unknown anchor '{tag}'")


# Geometry

_PRIMITIVES = {"box": Box, "cylinder": Cylinder, "capsule": Capsule, "sphere": Sphere}
_PRIMITIVE_DECODERS = {"size": tuple}


def _encode_asset_source(source) -> Json:
    if isinstance(source, Package):
        return {"package": source.path}
    if isinstance(source, Local):
        return {"local": source.path}
    raise TypeError(f"Unknown asset source {source!r}")


def _encode_geometry(geometry) -> Json:
    if isinstance(geometry, Mesh):
        return {"mesh": _encode_record(geometry, {"source": _encode_asset_source, "scale": _vector})}
    for tag, cls in _PRIMITIVES.items():
        if isinstance(geometry, cls):
            return {"primitive": {tag: _encode_record(geometry, {"size": _vector})}}
    raise TypeError(f"Unknown geometry {geometry!r}")


def _decode_asset_source(data: Json):
    tag, path = _single_tag(data, "asset source")
    if tag == "package":
        return Package(path)
    if tag == "local":
        return Local(path)
    raise ValueError(f"Unknown asset source '{tag}'")


def _decode_geometry(data: Json):
    tag, value = _single_tag(data, "geometry")
    if tag == "mesh":
        return _decode_record(Mesh, value, {
            "source": _decode_asset_source,
            "scale": lambda s: None if s is None else tuple(s),
        })
    if tag == "primitive":
        shape, fields = _single_tag(value, "primitive shape")
        if shape not in _PRIMITIVES:
            raise ValueError(f"Unknown primitive shape '{shape}'")
        return _decode_record(_PRIMITIVES[shape], fields, _PRIMITIVE_DECODERS)
    raise ValueError(f"Unknown geometry '{tag}'")


_MODEL_ENCODERS = {"geometry": _encode_geometry, "pose": _encode_pose}
_MODEL_DECODERS = {"geometry": _decode_geometry, "pose": _decode_pose}


# Inertias

_INERTIA_ENCODERS = {"center": _encode_pose, "moment": _encode_record}
_INERTIA_DECODERS = {
    "center": _decode_pose,
    "moment": lambda data: _decode_record(Moment, data),
}


# Joints

_SINGLE_DOF = {"prismatic": Prismatic, "revolute": Revolute, "continuous": Continuous}


def _encode_range_limits(limit) -> Json:
    if isinstance(limit, NoLimit):
        return "none"
    if isinstance(limit, SymmetricLimit):
        return {"symmetric": limit.limit}
    if isinstance(limit, AsymmetricLimit):
        return {"asymmetric": _encode_record(limit)}
    raise TypeError(f"Unknown range limit {limit!r}")


def _decode_range_limits(data: Json):
    if data == "none":
        return NoLimit()
    tag, value = _single_tag(data, "range limit")
    if tag == "symmetric":
        return SymmetricLimit(float(value))
    if tag == "asymmetric":
        return _decode_record(AsymmetricLimit, value)
    raise ValueError(f"Unknown range limit '{tag}'")


_LIMIT_ENCODERS = {name: _encode_range_limits for name in ("position", "effort", "velocity")}
_LIMIT_DECODERS = {name: _decode_range_limits for name in ("position", "effort", "velocity")}


def _encode_properties(properties) -> Json:
    if isinstance(properties, Fixed):
        return "fixed"
    for tag, cls in _SINGLE_DOF.items():
        if isinstance(properties, cls):
            return {tag: _encode_record(properties, {
                "axis": lambda axis: list(axis.xyz),
                "limits": lambda limits: _encode_record(limits, _LIMIT_ENCODERS),
            })}
    raise TypeError(f"Unknown joint properties {properties!r}")


def _decode_properties(data: Json):
    if data == "fixed":
        return Fixed()
    tag, value = _single_tag(data, "joint properties")
    if tag not in _SINGLE_DOF:
        raise ValueError(f"Unknown joint type '{tag}'")
    return _decode_record(_SINGLE_DOF[tag], value, {
        "axis": lambda xyz: JointAxis(tuple(xyz)),
        "limits": lambda limits: _decode_record(JointLimits, limits, _LIMIT_DECODERS),
    })


# Entity maps


def _encode_map(entries: Mapping[int, Parented], encode: Codec) -> Json:
    out = {}
    for entity_id in sorted(entries):
        entry = entries[entity_id]
        encoded = {"parent": entry.parent}
        encoded.update(encode(entry.bundle))
        out[str(entity_id)] = encoded
    return out


def _decode_map(data: Mapping[str, Json], decode: Codec) -> Dict[int, Parented]:
    entries = {}
    for key, value in data.items():
        fields = dict(value)
        parent = int(fields.pop("parent"))
        entries[int(key)] = Parented(parent=parent, bundle=decode(fields))
    return entries


def _map_codec(encode: Codec) -> Codec:
    return lambda entries: _encode_map(entries, encode)


def _map_decoder(decode: Codec) -> Codec:
    return lambda data: _decode_map(data, decode)


_WORKCELL_ENCODERS = {
    "frames": _map_codec(lambda frame: _encode_record(frame, {"anchor": _encode_anchor})),
    "visuals": _map_codec(lambda model: _encode_record(model, _MODEL_ENCODERS)),
    "collisions": _map_codec(lambda model: _encode_record(model, _MODEL_ENCODERS)),
    "inertias": _map_codec(lambda inertia: _encode_record(inertia, _INERTIA_ENCODERS)),
    "joints": _map_codec(lambda joint: _encode_record(joint, {"properties": _encode_properties})),
}

_WORKCELL_DECODERS = {
    "id": int,
    "frames": _map_decoder(lambda data: _decode_record(Frame, data, {"anchor": _decode_anchor})),
    "visuals": _map_decoder(lambda data: _decode_record(WorkcellModel, data, _MODEL_DECODERS)),
    "collisions": _map_decoder(lambda data: _decode_record(WorkcellModel, data, _MODEL_DECODERS)),
    "inertias": _map_decoder(lambda data: _decode_record(Inertia, data, _INERTIA_DECODERS)),
    "joints": _map_decoder(lambda data: _decode_record(Joint, data, {"properties": _decode_properties})),
}


def workcell_to_json(workcell: Workcell) -> Dict[str, Json]:
    """Encode a workcell into plain JSON values."""
    return _encode_record(workcell, _WORKCELL_ENCODERS)


def workcell_from_json(data: Mapping[str, Json]) -> Workcell:
    """Decode a workcell from plain JSON values."""
    if not isinstance(data, Mapping):
        raise ValueError(f"Expected a JSON object for a workcell, found {type(data).__name__}")
    return _decode_record(Workcell, data, _WORKCELL_DECODERS)


def to_string(workcell: Workcell) -> str:
    return json.dumps(workcell_to_json(workcell), indent=2)


def to_writer(workcell: Workcell, writer: TextIO) -> None:
    json.dump(workcell_to_json(workcell), writer, indent=2)


def from_str(text: str) -> Workcell:
    return workcell_from_json(json.loads(text))


def from_reader(reader) -> Workcell:
    return workcell_from_json(json.load(reader))


def from_bytes(data: Union[bytes, bytearray]) -> Workcell:
    return workcell_from_json(json.loads(data))
