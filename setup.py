import setuptools

setuptools.setup(
    name = 'monocubic',
    version = '1.0',
    description = 'monotone piecewise cubic Hermite interpolation',
    packages = setuptools.find_packages(exclude=['tests']),
    install_requires=['numpy', 'scipy'],
    extras_require={'test': ['pytest']},
)
