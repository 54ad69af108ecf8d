import logging
import os


class Workflow:
    def __init__(self, *, force=False):
        """Initialize the basic workflow object.

        This object takes care of any workflow operation that is common to all
        the workflows. Every new workflow should extend this class.
        """
        self.last_generated_outputs = None
        self._force_overwrite = force

    def manage_output_overwrite(self, outputs):
        """Check if a file will be overwritten upon processing the inputs.

        If it is bound to happen, an action is taken depending on
        self._force_overwrite (or --force via command line). A log message is
        output independently of the outcome to tell the user something
        happened.

        Parameters
        ----------
        outputs : list of str
            Paths the workflow is about to write.

        Returns
        -------
        proceed : bool
            Whether the workflow may write its outputs.
        """
        duplicates = [output for output in outputs if os.path.isfile(output)]

        if len(duplicates) > 0:
            if self._force_overwrite:
                logging.info("The following output files are about to be"
                             " overwritten.")
            else:
                logging.info("The following output files already exist, the "
                             "workflow will not continue processing any "
                             "further. Add the --force flag to allow output "
                             "files overwrite.")

            for dup in duplicates:
                logging.info(dup)

            return self._force_overwrite

        return True

    def run(self, *args, **kwargs):
        """Execute the workflow.

        Since this is an abstract class, raise exception if this code is
        reached (not implemented in child class or literally called on this
        class)
        """
        raise NotImplementedError(
            f"Error: {self.__class__} does not have a run method.")

    @classmethod
    def get_short_name(cls):
        """Return a short name for the workflow.

        Returns class name by default but it is strongly advised to set it to
        something shorter and easier to write on commandline.
        """
        return cls.__name__
