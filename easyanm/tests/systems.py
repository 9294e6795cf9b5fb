import numpy as np

import ase
import ase.build

from easyanm import Harmonic, AnisotropicNetworkModel


def small_cluster():
    """Return positions of an eight-atom cluster with reference modes"""
    positions = np.array([
        [-1.723,  1.188,  1.856],
        [-3.404,  0.600,  1.768],
        [-4.674, -1.113,  0.601],
        [-2.967, -0.682,  0.545],
        [-3.094,  2.295,  1.392],
        [-2.510,  1.079,  0.261],
        [-4.253,  0.540,  0.157],
        [-3.857, -0.766, -0.992],
        ])
    return positions


def random_cluster(natoms, size=8.0, seed=None):
    """Return random positions inside a cube with a minimum separation"""
    rng = np.random.default_rng(seed)
    positions = rng.uniform(-size / 2, size / 2, size=(1, 3))
    while len(positions) < natoms:
        candidate = rng.uniform(-size / 2, size / 2, size=(1, 3))
        if np.min(np.linalg.norm(positions - candidate, axis=1)) > 0.5:
            positions = np.concatenate((positions, candidate))
    return positions


def get_harmonic(name, model=None):
    if name == 'small_cluster':
        atoms = ase.Atoms('C8', positions=small_cluster())
    elif name == 'ethanol':
        atoms = ase.build.molecule('CH3CH2OH')
    else:
        raise ValueError('unknown system {}'.format(name))
    if model is None:
        model = AnisotropicNetworkModel()
    return Harmonic(atoms, model)
