#!/usr/bin/env python3
"""Basic usage example"""

from hierlog import LoggerBuilder, LoggerRegistry, ParameterPair, Severity

def main():
    # Root logger with default formatter and console output
    root = (LoggerBuilder()
        .with_name("app")
        .with_level(Severity.INFO)
        .with_console(colored=True)
        .build())

    registry = LoggerRegistry(root)
    net = registry.get_logger("net")
    net.set_level(Severity.DUMP)

    # Inherits formatter and output from root
    root.info(1, "Application started", ParameterPair("version", "1.0.0"))
    root.debug(2, "Filtered out by the INFO threshold")

    net.debug(10, "Packet received", ParameterPair("size", 45), ParameterPair("port", 8080))
    net.hexdump(11, b"valuevaluevaluevaluevaluevaluevaluevaluevalue", 45)

if __name__ == "__main__":
    main()
