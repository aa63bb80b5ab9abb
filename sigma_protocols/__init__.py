"""
Sigma protocols core subpackage.
"""

from .sigma_protocols import SigmaProtocol, ProverState
from .schnorr import SchnorrDLOG, DlogStatement
from .ciphersuite import CIPHERSUITE, PROTOCOLS, select_protocol

__all__ = [
    'SigmaProtocol',
    'ProverState',
    'SchnorrDLOG',
    'DlogStatement',
    'CIPHERSUITE',
    'PROTOCOLS',
    'select_protocol'
]
