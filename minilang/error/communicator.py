from minilang.util import Colors, Span


# Class used to create messages, which can be communicated to the programmer
class Communicator:

    # Creates an appropriate message string from the given arguments
    @staticmethod
    def create_message(
        program: str,
        span: Span,
        class_name="CompilerError",
        before: str = "",
        after: str = "",
        color=Colors.RED,
    ) -> str:
        # Do not color outside of the span
        excerpt = (
            f"-> {program[:span.start]}"
            f"{color}{program[span.start:span.end]}{Colors.ENDC}"
            f"{program[span.end:]}"
        )
        message = class_name + ": " + before + "\n" + excerpt
        if after:
            message += "\n" + after
        return message
