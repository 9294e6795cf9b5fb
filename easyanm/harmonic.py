import logging
import numpy as np
import networkx as nx

from easyanm.hessian import InvalidInput, DEFAULT_MASS, get_contact_graph
from easyanm.model import AnisotropicNetworkModel


logger = logging.getLogger(__name__) # logging per module


class Harmonic:
    """Represents the elastic network of an atomic structure"""

    def __init__(self, atoms, model=None, use_masses=True):
        """Constructor

        Parameters
        ----------

        atoms : ase.Atoms
            atoms instance of the structure; only its positions and masses
            are used. Periodic structures are not supported.

        model : ``AnisotropicNetworkModel`` instance or None
            network parameters; the default model is used if None.

        use_masses : bool
            whether to use the masses of the atoms instance. If False, all
            atoms are assigned ``DEFAULT_MASS``.

        """
        if np.any(atoms.pbc):
            raise InvalidInput('periodic structures are not supported')
        if model is None:
            model = AnisotropicNetworkModel()
        self.atoms  = atoms
        self.model  = model
        self.natoms = len(atoms)
        self.ndof   = 3 * len(atoms)
        if use_masses:
            self.masses = atoms.get_masses()
        else:
            self.masses = np.full(self.natoms, DEFAULT_MASS)

        self.hessian     = None
        self.eigenvalues = None
        self.modes       = None

    @property
    def positions(self):
        return self.atoms.get_positions()

    def get_graph(self):
        """Returns the elastic network as a networkX graph"""
        return get_contact_graph(self.positions, self.model.cutoff)

    def compute_hessian(self):
        """Computes and stores the hessian of the network"""
        graph = self.get_graph()
        logger.debug('building hessian for {} atoms connected by {} '
                'springs (cutoff = {})'.format(
                    self.natoms,
                    graph.number_of_edges(),
                    self.model.cutoff,
                    ))
        ncomponents = nx.number_connected_components(graph)
        if ncomponents > 1:
            logger.warning('elastic network consists of {} disconnected '
                    'components; expect more than six zero modes'.format(
                        ncomponents,
                        ))
        self.hessian = self.model.build_hessian(self.positions, self.masses)
        return self.hessian

    def compute_eigenmodes(self):
        """Computes and stores the normal modes of the network

        The six rigid-body modes are not included. Eigenvalues are
        frequencies in cm^-1 if the model is mass weighted.

        Returns
        -------

        eigenvalues : 1darray of shape (3 * natoms - 6,)

        modes : 2darray of shape (3 * natoms, 3 * natoms - 6)
            eigenvectors as columns

        """
        if self.hessian is None:
            self.compute_hessian()
        modes = self.model.compute_modes(self.hessian)
        self.eigenvalues = np.array([mode.eigenvalue for mode in modes])
        self.modes = np.stack([mode.eigenvector for mode in modes], axis=1)
        logger.debug('lowest nontrivial eigenvalue: {}'.format(
            self.eigenvalues[0]))
        return self.eigenvalues, self.modes

    def get_displacements(self, index):
        """Returns the eigenvector of a mode as per-atom displacements

        Parameters
        ----------

        index : int
            index of the mode, after removal of the rigid-body modes

        """
        if self.modes is None:
            self.compute_eigenmodes()
        return self.modes[:, index].reshape(self.natoms, 3)
