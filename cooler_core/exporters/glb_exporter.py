import logging

import trimesh

logger = logging.getLogger(__name__)


class GlbExporter:
    """Writes the assembly preview scene."""

    @staticmethod
    def export(scene: trimesh.Scene, output_path: str) -> str:
        scene.export(output_path, file_type='glb')
        logger.info("Wrote %s (%d parts)", output_path, len(scene.geometry))
        return output_path
