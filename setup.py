# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="unitycodemap",
    version="0.1.0",
    description="Inventario CSV de clases, structs y miembros de proyectos Unity en C#",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["unitycodemap*"]),  # Sin __init__.py en la raíz del paquete
    python_requires=">=3.9",
    install_requires=[
        "tree-sitter>=0.23",
        "tree-sitter-c-sharp>=0.23",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'unitycodemap=unitycodemap.main:main',  # CLI de análisis
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
