from .hessian import InvalidInput, DEFAULT_MASS, build_hessian, \
        get_contacts, get_contact_graph, mass_weigh
from .modes import DecompositionError, FREQUENCY_CONVERSION, NormalMode, \
        compute_modes, sort_eigenpairs
from .model import AnisotropicNetworkModel
from .harmonic import Harmonic
