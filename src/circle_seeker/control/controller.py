"""
Main controller - Coordinates all layers.

This is the main control loop that:
1. Snapshots the latest scan and circle detection
2. Gets a decision from StateMachine
3. Sends the command to the base

Scan faults skip the cycle. An invariant violation ends the run.
"""

import asyncio
import logging
import random
import signal
from typing import Optional

from circle_seeker.config import CONTROL_LOOP_HZ, STATS_INTERVAL_S
from circle_seeker.decision import StateMachine
from circle_seeker.errors import HardwareError, InvariantViolation, OutOfRange, ScanError
from circle_seeker.motion import Command
from circle_seeker.params import MoveSpecs
from circle_seeker.perception import ScanIngest
from circle_seeker.sensors import Camera, Lidar, Motor

from .emitter import CommandEmitter

logger = logging.getLogger(__name__)


class Controller:
    """
    Main robot controller.

    Coordinates:
    - Sensor layer (Lidar, Camera, Motor)
    - Perception layer (ScanIngest)
    - Decision layer (StateMachine)

    Usage:
        controller = Controller(MoveSpecs.load())
        asyncio.run(controller.run())
    """

    def __init__(
        self,
        specs: MoveSpecs,
        rng: Optional[random.Random] = None,
        lidar: Optional[Lidar] = None,
        camera: Optional[Camera] = None,
        motor: Optional[Motor] = None,
        loop_hz: float = CONTROL_LOOP_HZ,
    ):
        self.specs = specs
        self.loop_hz = loop_hz

        # Sensors
        self.lidar = lidar or Lidar(specs.geometry)
        self.camera = camera or Camera()
        self.motor = motor or Motor()

        # Perception
        self.ingest = ScanIngest(self.lidar, self.camera)

        # Decision
        self.state_machine = StateMachine(specs, rng=rng)

        # Output
        self.emitter = CommandEmitter(self.motor.drive)

        # Control state
        self._running = False
        self._loop_count = 0
        self.skipped_cycles = 0

    @property
    def is_running(self) -> bool:
        return self._running

    async def run(self):
        """Run the main control loop."""
        logger.info("Controller starting...")

        # Setup signal handlers for graceful shutdown
        loop = asyncio.get_running_loop()
        for sig in (signal.SIGINT, signal.SIGTERM):
            loop.add_signal_handler(sig, self.shutdown)

        try:
            if not self._init_hardware():
                raise HardwareError("Failed to initialize hardware")

            self._running = True
            logger.info("Entering main control loop")
            await self._control_loop()

        except InvariantViolation as e:
            logger.critical(f"Invariant violated, shutting down: {e}")
            raise
        except HardwareError:
            raise
        except Exception as e:
            logger.error(f"Controller error: {e}")
            raise
        finally:
            self._cleanup()

    def step(self) -> Optional[Command]:
        """
        Run one decision cycle.

        Returns:
            The command sent, or None if nothing was sent.

        Raises:
            InvariantViolation: the controller cannot continue.
        """
        cycle = self.ingest.update()
        if cycle is None:
            return None

        try:
            command = self.state_machine.decide(cycle)
        except OutOfRange as e:
            self.skipped_cycles += 1
            logger.warning(f"Skipping cycle, scan frame too short: {e}")
            return None
        except ScanError as e:
            self.skipped_cycles += 1
            logger.warning(f"Skipping cycle: {e}")
            return None

        if command is None:
            self.emitter.hold()
        else:
            self.emitter.emit(command)
        return command

    def shutdown(self):
        """Handle shutdown signal."""
        logger.info("Shutdown requested")
        self._running = False

    def _init_hardware(self) -> bool:
        """Initialize all hardware."""
        logger.info("Initializing hardware...")

        if not self.motor.connect():
            logger.error("Failed to connect to base controller")
            return False

        if not self.lidar.start():
            logger.error("Failed to start LIDAR")
            return False

        if not self.camera.start():
            logger.error("Failed to start camera")
            return False

        logger.info("Hardware initialized")
        return True

    def _cleanup(self):
        """Cleanup on shutdown."""
        logger.info("Cleaning up...")

        self._running = False

        # Stop motors first
        if self.motor.is_connected:
            self.motor.stop()
            self.motor.disconnect()

        if self.lidar.is_running:
            self.lidar.stop()
        if self.camera.is_running:
            self.camera.stop()

        logger.info("Cleanup complete")

    async def _control_loop(self):
        """Main control loop."""
        period = 1.0 / self.loop_hz
        loop = asyncio.get_running_loop()

        while self._running:
            loop_start = loop.time()

            self.step()

            # Maintain loop rate
            self._loop_count += 1
            elapsed = loop.time() - loop_start
            await asyncio.sleep(max(0, period - elapsed))

            if self._loop_count % max(1, int(self.loop_hz * STATS_INTERVAL_S)) == 0:
                self._log_stats()

    def _log_stats(self):
        """Log periodic statistics."""
        state = self.state_machine.state
        logger.info(
            f"Loop {self._loop_count}: "
            f"Mode={state.mode.name}, "
            f"Side={state.turn_direction.name}, "
            f"Sent={self.emitter.emitted}, "
            f"Held={self.emitter.held}, "
            f"Skipped={self.skipped_cycles}, "
            f"Last={self.emitter.last_command}"
        )
