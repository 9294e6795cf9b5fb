from collections import namedtuple

import numpy as np

from easyanm.hessian import InvalidInput


# converts sqrt(eigenvalue) of a mass-weighted ANM hessian into a
# wavenumber in cm^-1
FREQUENCY_CONVERSION = 1302.79

# three translations and three rotations of the whole network
NUM_RIGID_MODES = 6


class DecompositionError(RuntimeError):
    pass


class NormalMode(namedtuple('NormalMode', ['eigenvalue', 'eigenvector'])):
    """Eigenvalue and (read-only) eigenvector of a single normal mode

    The eigenvalue is either a raw hessian eigenvalue or a frequency in cm^-1
    for mass-weighted models. Eigenvectors are normalized and only defined up
    to an overall sign.

    """
    __slots__ = ()

    def __new__(cls, eigenvalue, eigenvector):
        eigenvector = np.array(eigenvector, dtype=float)
        eigenvector.flags.writeable = False
        return super().__new__(cls, float(eigenvalue), eigenvector)


def sort_eigenpairs(values, vectors):
    """Sorts eigenvalues in ascending order along with their eigenvectors

    The ordering is total: finite values are sorted numerically, followed by
    +inf and finally NaN. Ties keep their original order.

    Parameters
    ----------

    values : 1darray of shape (n,)
        eigenvalues

    vectors : 2darray of shape (m, n)
        eigenvectors as columns; column k belongs to values[k].

    """
    values = np.asarray(values, dtype=float)
    vectors = np.asarray(vectors, dtype=float)
    assert vectors.shape[1] == len(values)
    order = np.argsort(values, kind='stable') # NaN sorts last in numpy
    return values[order], vectors[:, order]


def to_frequencies(values):
    """Converts mass-weighted eigenvalues to frequencies in cm^-1

    Negative eigenvalues are mapped onto negative (i.e. imaginary)
    frequencies.

    """
    values = np.asarray(values, dtype=float)
    return np.sign(values) * np.sqrt(np.abs(values)) * FREQUENCY_CONVERSION


def _check_hessian(hessian):
    if hessian.ndim != 2 or hessian.shape[0] != hessian.shape[1]:
        raise InvalidInput('hessian should be a square matrix, got shape '
                '{}'.format(hessian.shape))
    ndof = hessian.shape[0]
    if ndof % 3 != 0:
        raise InvalidInput('hessian size ({}) is not a multiple of '
                'three'.format(ndof))
    if ndof < 3 * 3:
        raise InvalidInput('at least three atoms are required to compute '
                'normal modes, got {}'.format(ndof // 3))
    if not np.all(np.isfinite(hessian)):
        raise DecompositionError('hessian contains non-finite entries')
    if not np.allclose(hessian, hessian.T):
        raise DecompositionError('hessian is not symmetric')


def compute_modes(hessian, model=None):
    """Computes the normal modes of a hessian

    The hessian is diagonalized and its eigenpairs are sorted in ascending
    order. The six lowest modes correspond to rigid translations and
    rotations and are discarded based on their position, not based on a
    threshold on the eigenvalue. For mass-weighted models, the remaining
    eigenvalues are converted into frequencies (cm^-1).

    Parameters
    ----------

    hessian : 2darray of shape (3 * natoms, 3 * natoms)
        real symmetric hessian; natoms should be at least three. Symmetry is
        checked with ``np.allclose`` using default tolerances.

    model : ``AnisotropicNetworkModel`` instance or None
        determines whether eigenvalues are converted to frequencies.

    Returns
    -------

    list of ``NormalMode`` of length 3 * natoms - 6, sorted by eigenvalue

    """
    mass_weighted = False if model is None else model.mass_weighted
    hessian = np.asarray(hessian, dtype=float)
    _check_hessian(hessian)
    try:
        values, vectors = np.linalg.eigh(hessian)
    except np.linalg.LinAlgError as e:
        raise DecompositionError('eigendecomposition did not converge') from e
    values, vectors = sort_eigenpairs(values, vectors)

    values  = values[NUM_RIGID_MODES:]
    vectors = vectors[:, NUM_RIGID_MODES:]
    if mass_weighted:
        values = to_frequencies(values)
    return [NormalMode(values[k], vectors[:, k]) for k in range(len(values))]
