"""Global configuration for pytest"""

import pytest

import shadermodules


@pytest.fixture
def registry():
    """A fresh registry without any modules."""
    return shadermodules.ShaderModuleRegistry()


@pytest.fixture(autouse=True, scope="session")
def numerical_exceptions():
    """Turn numpy floating point warnings into errors, so that default-value
    parsing must deal with them explicitly.
    """
    import numpy as np

    old = np.seterr(all="raise")
    yield
    np.seterr(**old)
