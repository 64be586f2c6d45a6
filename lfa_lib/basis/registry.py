"""
Lookup from serialised basis type names to basis classes.
"""

from typing import Any, Dict

from lfa_lib.basis.base import Basis
from lfa_lib.basis.composition import Scale, Stack
from lfa_lib.basis.fixed import Constant
from lfa_lib.basis.fourier import Fourier
from lfa_lib.basis.polynomial import Polynomial
from lfa_lib.basis.rbf import RBFNetwork
from lfa_lib.basis.tile_coding import TileCoding
from lfa_lib.errors import InvalidConfiguration

BASIS_TYPES = {
    "polynomial": Polynomial,
    "fourier": Fourier,
    "rbf_network": RBFNetwork,
    "tile_coding": TileCoding,
    "constant": Constant,
    "stack": Stack,
    "scale": Scale,
}


def basis_from_dict(data: Dict[str, Any]) -> Basis:
    """
    Rebuild a basis from its plain-data configuration.

    Args:
        data: Output of ``Basis.to_dict``

    Returns:
        Equivalent basis

    Raises:
        InvalidConfiguration: If the type name is missing or unknown
    """
    try:
        cls = BASIS_TYPES[data["type"]]
    except KeyError as e:
        raise InvalidConfiguration(f"Unknown basis configuration: {data!r}") from e

    return cls._from_dict(data)
