import numpy as np

from easyanm.hessian import InvalidInput, build_hessian
from easyanm.modes import compute_modes


class AnisotropicNetworkModel:
    """Parameters of an anisotropic network model (ANM)

    Atoms that are closer than the cutoff are connected by identical harmonic
    springs with force constant gamma.

    References: Atilgan et al., Biophysical Journal 80 (2001) 505-515.

    """

    def __init__(self, cutoff=15.0, gamma=1.0, mass_weighted=False):
        """Constructor

        Parameters
        ----------

        cutoff : float [angstrom]
            maximum distance between two atoms that are connected by a spring.

        gamma : float
            force constant of all springs in the network.

        mass_weighted : bool
            whether the hessian is mass weighted, in which case the normal
            mode eigenvalues are reported as frequencies in cm^-1.

        """
        if not (np.isfinite(cutoff) and cutoff > 0):
            raise InvalidInput('cutoff should be positive and finite, got '
                    '{}'.format(cutoff))
        if not np.isfinite(gamma):
            raise InvalidInput('gamma should be finite, got {}'.format(gamma))
        self.cutoff        = float(cutoff)
        self.gamma         = float(gamma)
        self.mass_weighted = bool(mass_weighted)

    def build_hessian(self, positions, masses=None):
        return build_hessian(positions, masses, model=self)

    def compute_modes(self, hessian):
        return compute_modes(hessian, model=self)

    def __eq__(self, model):
        if not isinstance(model, AnisotropicNetworkModel):
            return NotImplemented
        return ((self.cutoff, self.gamma, self.mass_weighted) ==
                (model.cutoff, model.gamma, model.mass_weighted))

    def __repr__(self):
        return '{}(cutoff={}, gamma={}, mass_weighted={})'.format(
                self.__class__.__name__,
                self.cutoff,
                self.gamma,
                self.mass_weighted,
                )
