"""
tripmap: trip CSV -> static map PNG.

- model: 座標のパース/検証と CSV 行の集約
- visualizer2d: 描画コンテキスト、タイル背景、CLI
"""
__version__ = "0.1.0"
__all__ = ["model", "visualizer2d", "logging_config"]
