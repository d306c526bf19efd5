# setup.py
from setuptools import setup, find_packages

setup(
    name="bnk_extractor",
    version="0.1.0",
    packages=find_packages(include=['bnk_extractor', 'bnk_extractor.*']),
    install_requires=[
        "tqdm>=4.0.0",
    ],
    extras_require={
        'test': [
            "pytest>=7.0.0",
        ],
    },
    python_requires=">=3.8",
    description="Decode Wwise SoundBank files and extract embedded WEM payloads",
    keywords="wwise, bnk, wem, soundbank, extraction",
    entry_points={
        'console_scripts': [
            'extract-bnk=bnk_extractor.main:main',
        ],
    }
)
