#!python
import importlib
import os
import sys

from octsphere.workflows.flow_runner import run_flow

cli_flows = {
    "octsphere_mesh": ("octsphere.workflows.mesh", "OctSphereFlow"),
}


def run():
    """Run scripts declared as console entry points in setup.py."""
    script_name = os.path.basename(sys.argv[0])
    mod_name, flow_name = cli_flows.get(script_name, (None, None))
    if mod_name is None:
        print(f"Flow: {script_name} not Found in octsphere")
        print(f"Available flows: {', '.join(cli_flows.keys())}")
        sys.exit(1)
    mod = importlib.import_module(mod_name)
    run_flow(getattr(mod, flow_name)())
