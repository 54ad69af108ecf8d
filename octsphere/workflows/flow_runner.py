import logging

from octsphere import __version__ as octsphere_version
from octsphere.workflows.base import IntrospectiveArgumentParser


def get_level(lvl):
    """ Transforms the logging level passed on the commandline into a proper
    logging level name.
    """
    level = logging.getLevelName(str(lvl).upper())
    if isinstance(level, int):
        return level
    return logging.INFO


def run_flow(flow, args=None):
    """ Wraps the process of building an argparser that reflects the workflow
    that we want to run along with some generic parameters like logging and
    force. The resulting parameters are then fed to the workflow's run
    method.

    Parameters
    ----------
    flow : Workflow
        Workflow instance to run.
    args : list of str, optional
        Command line arguments. Defaults to ``sys.argv[1:]``.
    """
    parser = IntrospectiveArgumentParser()
    parser.add_workflow(flow)

    # Common workflow arguments
    parser.add_argument('--force', dest='force',
                        action='store_true', default=False,
                        help='Force overwriting output files.')

    parser.add_argument('--version', action='version',
                        version='octsphere {}'.format(octsphere_version))

    # Add logging parameters common to all workflows
    msg = 'Log messages display level. Accepted options include CRITICAL,'
    msg += ' ERROR, WARNING, INFO, DEBUG and NOTSET (default INFO).'
    parser.add_argument('--log_level', action='store', dest='log_level',
                        metavar='string', required=False, default='INFO',
                        help=msg)

    parser.add_argument('--log_file', action='store', dest='log_file',
                        metavar='string', required=False, default='',
                        help='Log file to be saved.')

    args = parser.get_flow_args(args)

    logging.basicConfig(filename=args['log_file'],
                        format='%(levelname)s:%(message)s',
                        level=get_level(args['log_level']))

    flow._force_overwrite = args['force']

    # Keep only workflow related parameters
    del args['force']
    del args['log_level']
    del args['log_file']

    return flow.run(**args)
