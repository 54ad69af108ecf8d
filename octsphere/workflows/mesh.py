#!/usr/bin/env python3

import logging
import os

from octsphere.core.octsphere import octsphere_mesh, resolve_radius
from octsphere.core.resolution import get_fragments_from_r
from octsphere.io.mesh import save_mesh
from octsphere.workflows.workflow import Workflow


class OctSphereFlow(Workflow):
    @classmethod
    def get_short_name(cls):
        return 'octsphere'

    def run(self, radius=0.0, diameter=0.0, hemisphere=False, fn=0.0,
            fa=12.0, fs=2.0, shared_edges=False, out_dir='',
            out_mesh='octsphere.obj'):
        """ Workflow for building a geodesic sphere mesh.

        The unit octahedron is subdivided until its equator best matches the
        circle resolution, scaled to the radius and saved as OBJ or npz.

        Parameters
        ----------
        radius : float, optional
            Sphere radius. Takes precedence over the diameter when positive.
            Defaults to 1 when neither is given.
        diameter : float, optional
            Sphere diameter, used when no radius is given.
        hemisphere : bool, optional
            Build only the upper half, closed by a flat face at z = 0.
        fn : float, optional
            Fixed number of fragments per circle. 0 derives it from fa and fs.
        fa : float, optional
            Minimum angle in degrees of one fragment.
        fs : float, optional
            Minimum length of one fragment.
        shared_edges : bool, optional
            Share midpoint vertices between neighbouring triangles.
        out_dir : string, optional
            Output directory. (default current directory)
        out_mesh : string, optional
            Name of the mesh file, ending in .obj or .npz.
        """
        out_path = os.path.join(out_dir, out_mesh)
        self.last_generated_outputs = {'out_mesh': out_path}

        if os.path.splitext(out_mesh)[1].lower() not in ('.obj', '.npz'):
            logging.error('The mesh file name should end in .obj or .npz,'
                          ' got {0}.'.format(out_mesh))
            return

        if not self.manage_output_overwrite([out_path]):
            return

        radius = resolve_radius(radius, diameter)
        try:
            fragments = get_fragments_from_r(radius, fn=fn, fs=fs, fa=fa)
        except ValueError as e:
            logging.error(str(e))
            return

        logging.info('Building {0} of radius {1} with {2} fragments'.format(
            'hemisphere' if hemisphere else 'sphere', radius, fragments))
        mesh = octsphere_mesh(radius, hemisphere=hemisphere, fn=fragments,
                              shared_edges=shared_edges)

        if out_dir and not os.path.isdir(out_dir):
            os.makedirs(out_dir)
        save_mesh(out_path, mesh)
        return mesh
