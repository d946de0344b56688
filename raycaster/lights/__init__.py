"""Light sources for a scene: point lights."""