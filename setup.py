from setuptools import setup, find_packages

__version__ = '0.1.0'

requirements = [
    'coloredlogs',
]

setup(
    name='soulbound',
    version=__version__,
    description='Soulbound credential tokens: a lock and burn-authorization overlay for an NFT ledger.',
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=requirements,
    extras_require={
        'test': ['pytest'],
    },
    classifiers=[
        'Programming Language :: Python :: 3',
    ],
    zip_safe=True,
    include_package_data=True,
)
