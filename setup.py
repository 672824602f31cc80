from setuptools import setup

setup(
    name='atmfjstc-endianness',
    version='1.0.0',

    author_email='atmfjstc@protonmail.com',

    package_dir={'': 'src'},
    packages=['atmfjstc.lib.endianness'],
    package_data={'atmfjstc.lib.endianness': ['py.typed']},

    install_requires=[
    ],

    extras_require={
        'test': [
            'hypothesis>=6, <7',
        ],
    },

    zip_safe=True,

    description="Read fixed-width numbers from bytes in big- or little-endian order, without exceptions",

    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Typing :: Typed",
    ],
    python_requires='>=3.7',
)
