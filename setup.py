"""
Setup script for cup-game-rgs package with optional Cython compilation.

This builds the internal round and RGS modules (_round/*, _rgs/*) as
compiled extensions when Cython is available, while keeping the public
API (callbacks.py, presentation.py, runner.py, errors.py) as readable
Python source.
"""

from setuptools import setup, find_packages, Extension
import os

# Check if Cython is available
try:
    from Cython.Build import cythonize
    USE_CYTHON = True
except ImportError:
    USE_CYTHON = False
    print("Cython not found. Building without compilation (source only).")

# Internal modules to compile with Cython
CYTHON_MODULES = [
    "src/cup_game/_round/state_machine.py",
    "src/cup_game/_round/selection.py",
    "src/cup_game/_round/orchestrator.py",
    "src/cup_game/_rgs/classification.py",
    "src/cup_game/_rgs/http_client.py",
]


def get_extensions():
    """Build Extension objects for Cython compilation."""
    if not USE_CYTHON:
        return []

    extensions = []
    for module_path in CYTHON_MODULES:
        if os.path.exists(module_path):
            # src/cup_game/_round/foo.py -> cup_game._round.foo
            module_name = module_path.replace("src/", "").replace("/", ".").replace(".py", "")
            extensions.append(
                Extension(
                    name=module_name,
                    sources=[module_path],
                )
            )
    return extensions


def get_ext_modules():
    """Get extension modules, cythonized if Cython is available."""
    extensions = get_extensions()
    if not extensions:
        return []

    return cythonize(
        extensions,
        compiler_directives={
            "language_level": "3",
            "boundscheck": False,
            "wraparound": False,
        },
        nthreads=os.cpu_count() or 1,
    )


ext_modules = get_ext_modules() if USE_CYTHON else []

setup(
    name="cup-game-rgs",
    version="1.0.0",
    description="Cup game client - round orchestration against a Remote Game Server",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    ext_modules=ext_modules,
    install_requires=[
        "python-dotenv>=1.0.0",
        "pydantic>=2.5.0",
        "httpx>=0.25.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
        "dev": [
            "cython>=3.0",
            "build",
            "wheel",
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "cup-game=cup_game.cli:main",
        ],
    },
    package_data={
        "cup_game": ["*.so", "*.pyd", "*/*.so", "*/*.pyd"],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Cython",
    ],
)
