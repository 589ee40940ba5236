from setuptools import setup, find_packages

setup(
    name="form-validation-lib",
    version="0.1.0",
    description="Declarative field validation with pluggable validators and localizable messages",
    author="Jude Payne",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={
        'form_validation': ['local-config.yaml', 'messages.yaml'],
    },
    include_package_data=True,
    install_requires=[
        'pyyaml>=6.0',
        'jsonschema>=4.17.0',
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
    python_requires='>=3.9',
)
