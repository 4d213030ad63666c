def test_public_imports() -> None:
    # A lightweight contract test: keep the most common imports stable.
    import padepy

    assert hasattr(padepy, "__version__")

    from padepy import buffer_approx, scalar_approx  # noqa: F401

    for name in padepy.KERNEL_NAMES:
        assert callable(getattr(padepy, name))
        assert callable(getattr(padepy, f"{name}_inplace"))
