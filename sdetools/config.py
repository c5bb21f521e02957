import os, sys
import argparse
import logging


class Config:
    """Singleton configuration class for SDETools"""
    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(Config, cls).__new__(cls)
        return cls._instance

    def __init__(self):
        if not self._initialized:
            self._setup_defaults()
            Config._initialized = True

    def _setup_defaults(self):
        """Default process parameters and output settings"""
        # Ornstein-Uhlenbeck example of the toolbox documentation
        self.OU_DEFAULTS = {
            'theta': [4.0],
            'mu': [0.0],
            'sigma': [0.25],
            'y0': [-1.0, -0.5, 0.0, 0.5, 1.0],
            't0': 0.0,
            'tf': 1.0,
            'dt': 1.0e-2,
        }
        self.DTYPES = ('float64', 'float32')
        self.LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
        self.LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR')

    def create_main_parser(self):
        """Create the main argument parser"""
        defaults = self.OU_DEFAULTS
        parser = argparse.ArgumentParser(
            prog="sdetools-ou",
            description="Generate Ornstein-Uhlenbeck sample paths from the analytic solution"
        )
        parser.add_argument('--theta', type=float, nargs='+',
                            default=defaults['theta'],
                            help='Drift rate, one value or one per dimension')
        parser.add_argument('--mu', type=float, nargs='+',
                            default=defaults['mu'],
                            help='Drift mean, one value or one per dimension')
        parser.add_argument('--sigma', type=float, nargs='+',
                            default=defaults['sigma'],
                            help='Diffusion, one value or one per dimension')
        parser.add_argument('--y0', type=float, nargs='+',
                            default=defaults['y0'],
                            help='Initial conditions, one per dimension')

        parser.add_argument('--t0', type=float, default=defaults['t0'],
                            help='Start time')
        parser.add_argument('--tf', type=float, default=defaults['tf'],
                            help='Final time (may be before t0)')
        parser.add_argument('--dt', type=float, default=defaults['dt'],
                            help='Target sample spacing (positive); adjusted so that both t0 and tf are sampled')

        parser.add_argument('--SEED', type=int, default=None,
                            help='Random seed for reproducibility')
        parser.add_argument('--DTYPE', type=str, choices=self.DTYPES,
                            default='float64',
                            help='Floating point precision of the output')
        parser.add_argument('--RETURN_WIENER', action='store_true',
                            help='Also save the integrated Wiener increments')

        parser.add_argument('--DATA_SAVE_PATH', type=str, default=None,
                            help='Path to save data.')
        parser.add_argument('--LOG_SAVE_PATH', type=str, default=None,
                            help='Path to save log.')
        parser.add_argument('--LOG_LEVEL', type=str, choices=self.LOG_LEVELS,
                            default='INFO',
                            help='Logging level')
        return parser

    def parse_args(self, argv=None):
        """Parse command line arguments for main program"""
        main_parser = self.create_main_parser()
        return main_parser.parse_args(argv)

    def setup_logging(self, log_file=None, level='INFO'):
        """Set up logging to console and, if given, to a file."""
        for handler in logging.root.handlers[:]:
            logging.root.removeHandler(handler)
            handler.close()

        handlers = [logging.StreamHandler(sys.stdout)]
        if log_file is not None:
            log_dir = os.path.dirname(os.path.abspath(log_file))
            os.makedirs(log_dir, exist_ok=True)
            handlers.insert(0, logging.FileHandler(log_file, encoding='utf-8'))

        logging.basicConfig(
            level=getattr(logging, level),
            format=self.LOG_FORMAT,
            handlers=handlers)


# Helper function for logging
def logprint(message):
    """Log message to both file and console."""
    logging.info(message)


# Create global instance
config = Config()

# Export functions
create_main_parser = config.create_main_parser
parse_args = config.parse_args
setup_logging = config.setup_logging


def get_config():
    """ Get the global config instance - loads only once """
    return config


__all__ = [
    'config',
    'get_config',
    'create_main_parser',
    'parse_args',
    'setup_logging',
    'logprint',
]
