"""Protocol states, error codes and default values shared by the test engine."""

from __future__ import annotations

import enum
import socket

# Protocol identifiers.
PROTOCOL_TCP = socket.SOCK_STREAM
PROTOCOL_UDP = socket.SOCK_DGRAM
PROTOCOL_SCTP = 12

# Default block sizes and timing values.
DEFAULT_UDP_BLKSIZE = 1460
DEFAULT_TCP_BLKSIZE = 128 * 1024
DEFAULT_SCTP_BLKSIZE = 64 * 1024
DEFAULT_PACING_TIMER = 1000
DEFAULT_NO_MSG_RCVD_TIMEOUT = 120000
MIN_NO_MSG_RCVD_TIMEOUT = 100

WARN_STR_LEN = 128


class TestState(enum.IntEnum):
    """States exchanged over the control connection."""

    __test__ = False

    TEST_START = 1
    TEST_RUNNING = 2
    RESULT_REQUEST = 3
    TEST_END = 4
    STREAM_BEGIN = 5
    STREAM_RUNNING = 6
    STREAM_END = 7
    ALL_STREAMS_END = 8
    PARAM_EXCHANGE = 9
    CREATE_STREAMS = 10
    SERVER_TERMINATE = 11
    CLIENT_TERMINATE = 12
    EXCHANGE_RESULTS = 13
    DISPLAY_RESULTS = 14
    IPERF_START = 15
    IPERF_DONE = 16
    ACCESS_DENIED = -1
    SERVER_ERROR = -2


class ErrorCategory(enum.Enum):
    """Broad class an error code belongs to."""

    NONE = "none"
    PARAMETER = "parameter"
    TEST = "test"
    STREAM = "stream"
    TIMER = "timer"


class ErrorCode(enum.IntEnum):
    """Error codes, each carrying a short human-readable description."""

    description: str

    def __new__(cls, value: int, description: str) -> "ErrorCode":
        member = int.__new__(cls, value)
        member._value_ = value
        member.description = description
        return member

    IENONE = 0, "no error"
    # Parameter errors
    IESERVCLIENT = 1, "cannot be both server and client"
    IENOROLE = 2, "must either be a client (-c) or server (-s)"
    IESERVERONLY = 3, "some option you are trying to set is server only"
    IECLIENTONLY = 4, "some option you are trying to set is client only"
    IEDURATION = 5, "test duration too long (maximum = 86400 seconds)"
    IENUMSTREAMS = 6, "number of parallel streams too large (maximum = 128)"
    IEBLOCKSIZE = 7, "block size too large (maximum = 1048576 bytes)"
    IEBUFSIZE = 8, "socket buffer size too large (maximum = 536870912 bytes)"
    IEINTERVAL = 9, "invalid report interval (min = 0.1, max = 60 seconds)"
    IEMSS = 10, "TCP MSS too large (maximum = 9216 bytes)"
    IENOSENDFILE = 11, "this OS does not support sendfile"
    IEOMIT = 12, "bogus value for --omit"
    IEUNIMP = 13, "an option you are trying to set is not implemented yet"
    IEFILE = 14, "unable to open -F file"
    IEBURST = 15, "invalid burst count (maximum = 1000)"
    IEENDCONDITIONS = 16, "only one test end condition (-t, -n, -k) may be specified"
    IELOGFILE = 17, "unable to open log file"
    IENOSCTP = 18, "no SCTP support available"
    IEBIND = 19, "local port specified with no local bind option"
    IEUDPBLOCKSIZE = 20, "block size invalid"
    IEBADTOS = 21, "bad TOS value (must be between 0 and 255 inclusive)"
    IESETCLIENTAUTH = 22, "bad configuration of client authentication"
    IESETSERVERAUTH = 23, "bad configuration of server authentication"
    IEBADFORMAT = 24, "bad format specifier (valid formats are in the set [kmgtKMGT])"
    IEREVERSEBIDIR = 25, "cannot be both reverse and bidirectional"
    IEBADPORT = 26, "port number must be between 1 and 65535 inclusive"
    IETOTALRATE = 27, "total required bandwidth is larger than server limit"
    IETOTALINTERVAL = 28, "invalid time interval for calculating average data rate"
    IESKEWTHRESHOLD = 29, "skew threshold must be a positive number"
    IEIDLETIMEOUT = 30, "idle timeout parameter is not positive or larger than allowed limit"
    IERCVTIMEOUT = 31, "receive timeout value is incorrect or not in range"
    IERVRSONLYRCVTIMEOUT = 32, "client receive timeout is valid only in receiving mode"
    # Test errors
    IENEWTEST = 100, "unable to create a new test"
    IEINITTEST = 101, "test initialization failed"
    IELISTEN = 102, "unable to start listener for connections"
    IECONNECT = 103, "unable to connect to server"
    IEACCEPT = 104, "unable to accept connection from client"
    IESENDCOOKIE = 105, "unable to send cookie to server"
    IERECVCOOKIE = 106, "unable to receive cookie at server"
    IECTRLWRITE = 107, "unable to write to the control socket"
    IECTRLREAD = 108, "unable to read from the control socket"
    IECTRLCLOSE = 109, "control socket has closed unexpectedly"
    IEMESSAGE = 110, "received an unknown control message"
    IESENDMESSAGE = 111, "unable to send control message"
    IERECVMESSAGE = 112, "unable to receive control message"
    IESENDPARAMS = 113, "unable to send parameters to server"
    IERECVPARAMS = 114, "unable to receive parameters from client"
    IEPACKAGERESULTS = 115, "unable to package results"
    IESENDRESULTS = 116, "unable to send results"
    IERECVRESULTS = 117, "unable to receive results"
    IESELECT = 118, "select failed"
    IECLIENTTERM = 119, "the client has terminated"
    IESERVERTERM = 120, "the server has terminated"
    IEACCESSDENIED = 121, "the server is busy running a test. try again later"
    IESETNODELAY = 122, "unable to set TCP/SCTP NODELAY"
    IESETMSS = 123, "unable to set TCP/SCTP MSS"
    IESETBUF = 124, "unable to set socket buffer size"
    IESETTOS = 125, "unable to set IP TOS"
    IESETCOS = 126, "unable to set IPv6 traffic class"
    IESETFLOW = 127, "unable to set IPv6 flow label"
    IEREUSEADDR = 128, "unable to reuse address on socket"
    IENONBLOCKING = 129, "unable to set socket to non-blocking"
    IESETWINDOWSIZE = 130, "unable to set socket window size"
    IEPROTOCOL = 131, "protocol does not exist"
    IEAFFINITY = 132, "unable to set CPU affinity"
    IEDAEMON = 133, "unable to become a daemon"
    IESETCONGESTION = 134, "unable to set TCP_CONGESTION"
    IEPIDFILE = 135, "unable to write PID file"
    IEV6ONLY = 136, "unable to set/reset IPV6_V6ONLY"
    IESETSCTPDISABLEFRAG = 137, "unable to set SCTP_DISABLE_FRAGMENTS"
    IESETSCTPNSTREAM = 138, "unable to set SCTP_INIT num of SCTP streams"
    IESETSCTPBINDX = 139, "unable to process sctp_bindx() parameters"
    IESETPACING = 140, "unable to set socket pacing"
    IESETBUF2 = 141, "socket buffer size not set correctly"
    IEAUTHTEST = 142, "test authorization failed"
    IEBINDDEV = 143, "unable to bind-to-device"
    IENOMSG = 144, "idle timeout for receiving data"
    IESETDONTFRAGMENT = 145, "unable to set IP Do-Not-Fragment flag"
    IEBINDDEVNOSUPPORT = 146, "`<ip>%<dev>` is not supported as system does not support bind to device"
    IEHOSTDEV = 147, "host device name (ip%<dev>) is supported (and required) only for IPv6 link-local address"
    # Stream errors
    IECREATESTREAM = 200, "unable to create a new stream"
    IEINITSTREAM = 201, "unable to initialize stream"
    IESTREAMLISTEN = 202, "unable to start stream listener"
    IESTREAMCONNECT = 203, "unable to connect stream"
    IESTREAMACCEPT = 204, "unable to accept stream connection"
    IESTREAMWRITE = 205, "unable to write to stream socket"
    IESTREAMREAD = 206, "unable to read from stream socket"
    IESTREAMCLOSE = 207, "stream socket has closed unexpectedly"
    IESTREAMID = 208, "stream has an invalid id"
    # Timer errors
    IENEWTIMER = 300, "unable to create new timer"
    IEUPDATETIMER = 301, "unable to update timer"

    def category(self) -> ErrorCategory:
        """Return the class of error this code belongs to."""
        value = int(self)
        if value == 0:
            return ErrorCategory.NONE
        if value < 100:
            return ErrorCategory.PARAMETER
        if value < 200:
            return ErrorCategory.TEST
        if value < 300:
            return ErrorCategory.STREAM
        return ErrorCategory.TIMER


class IperfError(Exception):
    """An error raised by the measurement engine, tagged with an ErrorCode."""

    def __init__(self, code: int | ErrorCode, detail: str | None = None) -> None:
        self.code = ErrorCode(code)
        self.detail = detail
        message = self.code.description
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)

    @property
    def category(self) -> ErrorCategory:
        """Class of the underlying error code."""
        return self.code.category()