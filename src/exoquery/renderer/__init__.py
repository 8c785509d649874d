from .engine import TextureSynthesizer, polar_mask, synthesize_texture

__all__ = ["TextureSynthesizer", "polar_mask", "synthesize_texture"]
