"""Scene Bounded Context.

Responsible for reading and checking the layout of a scene:
- Value Objects: Structure, Antenna, ParsedLine, BoundingBox, ValidationError
- Entities: Scene
- Services: load_scene, validate_scene, scene_bounding_box
"""
