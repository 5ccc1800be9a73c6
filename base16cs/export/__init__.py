from .yaml_export import export_derived_palette, serialize_derived_palette

__all__ = ["export_derived_palette", "serialize_derived_palette"]
