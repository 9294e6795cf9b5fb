import pytest
import numpy as np

from easyanm import AnisotropicNetworkModel, InvalidInput, build_hessian, \
        compute_modes

from systems import small_cluster


def test_defaults():
    model = AnisotropicNetworkModel()
    assert model.cutoff == 15.0
    assert model.gamma == 1.0
    assert not model.mass_weighted
    assert model == AnisotropicNetworkModel(15, 1, False)
    assert model != AnisotropicNetworkModel(mass_weighted=True)
    assert 'cutoff=15.0' in repr(model)


def test_invalid():
    for cutoff in [0.0, -1.0, np.inf, np.nan]:
        with pytest.raises(InvalidInput):
            AnisotropicNetworkModel(cutoff=cutoff)
    with pytest.raises(InvalidInput):
        AnisotropicNetworkModel(gamma=np.nan)


def test_methods():
    model = AnisotropicNetworkModel(cutoff=4.0, gamma=0.5)
    positions = small_cluster()
    hessian = model.build_hessian(positions)
    assert np.allclose(hessian, build_hessian(positions, model=model))
    assert np.allclose(build_hessian(positions), 2 * build_hessian(
        positions, model=AnisotropicNetworkModel(gamma=0.5)))

    modes = model.compute_modes(hessian)
    modes_ = compute_modes(hessian, model)
    assert np.allclose(
            [mode.eigenvalue for mode in modes],
            [mode.eigenvalue for mode in modes_],
            )
