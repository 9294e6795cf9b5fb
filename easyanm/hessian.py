import numpy as np
import networkx as nx


DEFAULT_MASS = 12.011 # atoms without explicit mass are treated as carbon


class InvalidInput(ValueError):
    pass


def _as_positions(positions):
    positions = np.asarray(positions, dtype=float)
    if positions.ndim != 2 or positions.shape[1] != 3:
        raise InvalidInput('positions should have shape (natoms, 3), got '
                '{}'.format(positions.shape))
    return positions


def _as_masses(masses, natoms):
    if masses is None:
        return np.full(natoms, DEFAULT_MASS)
    masses = np.asarray(masses, dtype=float).reshape(-1)
    if len(masses) != natoms:
        raise InvalidInput('number of masses ({}) does not match number of '
                'atoms ({})'.format(len(masses), natoms))
    if not np.all(masses > 0):
        raise InvalidInput('masses should be strictly positive')
    return masses


def get_contacts(positions, cutoff):
    """Returns the pairs of atoms that are connected by a spring

    Parameters
    ----------

    positions : 2darray of shape (natoms, 3) [angstrom]
        atomic positions.

    cutoff : float [angstrom]
        pairs whose distance is strictly smaller than the cutoff are
        connected.

    """
    positions = _as_positions(positions)
    deltas = positions[None, :, :] - positions[:, None, :]
    sq_dists = np.sum(deltas ** 2, axis=-1)
    i, j = np.where(np.triu(sq_dists < cutoff ** 2, k=1))
    return np.stack((i, j), axis=1)


def get_contact_graph(positions, cutoff):
    """Returns the elastic network as a networkX graph

    Atoms are nodes and springs are edges, weighted by the distance between
    both atoms. A network which consists of more than one connected
    component possesses additional zero modes besides the six rigid-body
    modes of the whole structure.

    """
    positions = _as_positions(positions)
    graph = nx.Graph()
    graph.add_nodes_from(range(len(positions)))
    for i, j in get_contacts(positions, cutoff):
        graph.add_edge(
                int(i),
                int(j),
                weight=np.linalg.norm(positions[j] - positions[i]),
                )
    return graph


def mass_weigh(hessian, masses):
    """Divides each 3x3 block (i, j) of a hessian by sqrt(m_i * m_j)

    Parameters
    ----------

    hessian : 2darray of shape (3 * natoms, 3 * natoms)
        cartesian hessian; it is not modified.

    masses : 1darray of shape (natoms,) [amu]
        atomic masses

    """
    masses = np.repeat(masses, 3)
    mass_matrix = 1 / np.sqrt(np.outer(masses, masses))
    return mass_matrix * hessian


def build_hessian(positions, masses=None, model=None):
    """Builds the anisotropic network model hessian of a structure

    Each pair of distinct atoms (i, j) closer than the cutoff is connected by
    a harmonic spring with force constant gamma. Its contribution to the
    hessian is the 3x3 super-element

        S = - gamma / d_ij^2 * outer(r_ij, r_ij)

    which is stored in the off-diagonal blocks (i, j) and (j, i) and
    subtracted from the diagonal blocks (i, i) and (j, j). As a consequence,
    the hessian is symmetric and each diagonal block equals the negated sum
    of the off-diagonal blocks in its block row, regardless of which pairs
    are within the cutoff.

    Parameters
    ----------

    positions : array_like of shape (natoms, 3) [angstrom]
        cartesian coordinates of the atoms. At least two atoms are required.

    masses : array_like of shape (natoms,) [amu] or None
        atomic masses; only used when the model is mass weighted. If None,
        all atoms are assigned ``DEFAULT_MASS``.

    model : ``AnisotropicNetworkModel`` instance or None
        cutoff, gamma and mass weighting to use. The default model is used
        if None.

    """
    if model is None:
        from easyanm.model import AnisotropicNetworkModel
        model = AnisotropicNetworkModel()
    positions = _as_positions(positions)
    natoms = positions.shape[0]
    if natoms < 2:
        raise InvalidInput('at least two atoms are required to build a '
                'hessian, got {}'.format(natoms))
    masses = _as_masses(masses, natoms)

    cutoff2 = model.cutoff ** 2
    hessian = np.zeros((3 * natoms, 3 * natoms))
    for i in range(natoms):
        for j in range(i):
            delta = positions[j] - positions[i]
            d2 = np.dot(delta, delta)
            if d2 >= cutoff2:
                continue
            if d2 == 0:
                raise InvalidInput('atoms {} and {} have identical '
                        'positions'.format(j, i))
            element = - model.gamma / d2 * np.outer(delta, delta)
            hessian[3 * i:3 * i + 3, 3 * j:3 * j + 3] = element
            hessian[3 * j:3 * j + 3, 3 * i:3 * i + 3] = element
            hessian[3 * i:3 * i + 3, 3 * i:3 * i + 3] -= element
            hessian[3 * j:3 * j + 3, 3 * j:3 * j + 3] -= element

    if model.mass_weighted:
        hessian = mass_weigh(hessian, masses)
    return hessian
