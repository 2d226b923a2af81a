"""
Configuration constants for the circle seeker robot.

Hardware and runtime constants that are not tuned per run.
Motion thresholds and sector windows live in params.json (see params.py).
"""

# =============================================================================
# HARDWARE PORTS
# =============================================================================

# LIDAR (RPLIDAR)
LIDAR_PORT = "/dev/ttyUSB0"
LIDAR_BAUDRATE = 115200
LIDAR_MOTOR_PWM = 660

# Base controller (velocity commands)
BASE_PORT = "/dev/ttyUSB1"
BASE_BAUDRATE = 115200

# Camera
CAMERA_INDEX = 0
CAMERA_WIDTH = 640
CAMERA_HEIGHT = 480
CAMERA_FOV = 60  # degrees, horizontal

# =============================================================================
# CONTROL PARAMETERS
# =============================================================================

CONTROL_LOOP_HZ = 20  # Polls faster than the scanner rotates; repeated scans are skipped
STATS_INTERVAL_S = 5

# =============================================================================
# CIRCLE DETECTION
# =============================================================================

DETECTION_HZ = 10

# Sentinel published when no circle is in view
NO_TARGET = -10.0

# Physical diameter of the target circle (m), used for the range estimate
CIRCLE_DIAMETER = 0.20

# cv2.HoughCircles tuning
HOUGH_DP = 1.2
HOUGH_MIN_DIST = 40  # px between circle centers
HOUGH_CANNY_THRESHOLD = 100
HOUGH_ACCUMULATOR_THRESHOLD = 40
CIRCLE_MIN_RADIUS = 8  # px
CIRCLE_MAX_RADIUS = 200  # px

# =============================================================================
# LIDAR PROCESSING
# =============================================================================

LIDAR_MIN_QUALITY = 10  # Minimum quality to accept reading
LIDAR_MIN_DISTANCE = 0.05  # m, closer readings are the robot body
LIDAR_FILL_MAX_DEG = 1.5  # Empty beams take the nearest reading within this angle

# =============================================================================
# WEB INTERFACE
# =============================================================================

WEB_HOST = "0.0.0.0"
WEB_PORT = 8080
