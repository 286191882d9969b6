from glob import glob
from setuptools import setup


setup(
    name='calccraft',
    use_scm_version={
        # Building from a plain source tree, not a checkout
        'fallback_version': '0.1.0',
    },
    description='Infix expression calculator',
    install_requires=[
        'regex',
        'prompt_toolkit',
    ],
    packages=['calccraft'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    python_requires='>=3.7',
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    setup_requires=[
        'setuptools_scm',
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
            'coverage',
            'flake8',
            'mypy',
        ],
    },
    scripts=glob('bin/*'),
    license='ISC',
)
