"""
Groups subpackage: prime fields, elliptic curves and the P-256 group.
"""

from .base import Group, ScalarField
from .p256 import GroupP256, P256ScalarField
from .field import GF, PrimeField, PrimeFieldElement
from .elliptic_curve import EllipticCurve, EllipticCurvePoint

__all__ = [
    'Group', 'ScalarField', 'GroupP256', 'P256ScalarField',
    'GF', 'PrimeField', 'PrimeFieldElement',
    'EllipticCurve', 'EllipticCurvePoint'
]
