from setuptools import setup

setup(
    name="hex-montecarlo",
    version="0.1.0",
    description="Hex against a Monte Carlo computer player (board model, win checker, playout selector)",
    python_requires=">=3.9",
    py_modules=[
        "hex_adjacency",
        "hex_arena",
        "hex_board",
        "hex_config",
        "hex_evaluator",
        "hex_game",
        "hex_play",
        "hex_renderer",
        "monte_carlo_player",
        "random_player",
    ],
    install_requires=[
        "numpy",
        "matplotlib",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "hex-play=hex_play:main",
            "hex-arena=hex_arena:main",
        ],
    },
)
