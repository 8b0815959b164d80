# statline

`statline` builds a one-line system status string from small components
and refreshes it once per second. By default it writes the line into the
`WM_NAME` property of the X root window, where window managers that read
their status from there will show it. It can also print the line on
standard output.

Linux is the target system: most components read `/proc` and `/sys`.

## Installation

```
pip install .
```

## Usage

```
statline        # set the X root window name every second
statline -s     # print the status line on stdout every second instead
statline -1     # print the status line on stdout once and exit
statline -v     # write "statline-1.0" to stderr and exit
```

Any other flag or argument writes `usage: statline [-v] [-s] [-1]` to
stderr. `-v` and usage errors exit with status 1.

Without `-s` or `-1`, `statline` connects to the X server named by
`$DISPLAY`, using an `MIT-MAGIC-COOKIE-1` entry from `$XAUTHORITY` (or
`~/.Xauthority`) when there is one. If the display cannot be opened it
reports `XOpenDisplay: Failed to open display` and exits with status 1.
On exit the root window name is cleared.

SIGINT and SIGTERM stop the loop after the current update. SIGUSR1 cuts
the current wait short and refreshes the line at once.

The line shown by the command is fixed in `statline.cli.COMPONENTS`:
CPU usage, uptime, and the date and time, formatted as

```
[ 12%][3h 25m]  05-14-2024 09:41AM
```

A component that has no value shows `n/a` (`statline.cli.UNKNOWN_STR`).
The first CPU reading has no earlier sample to compare with, so it shows
`n/a`.

## Components

Each component is a function that takes one argument and returns a
string, or `None` when the value cannot be read.

| module | function | what it returns | argument |
|---|---|---|---|
| `statline.battery` | `battery_perc`, `battery_state`, `battery_remaining` | charge in percent; `+` charging, `-` discharging, `o` full or not charging, `?` otherwise; time left as `Xh Ym` (empty when not discharging) | battery name (`BAT0`) |
| `statline.files` | `cat` | first line of a file | path |
| `statline.files` | `num_files` | number of entries in a directory | path |
| `statline.files` | `run_command` | first line a shell command prints | command |
| `statline.cpu` | `cpu_freq`, `cpu_perc` | frequency of the first CPU; usage in percent since the previous call | unused |
| `statline.system` | `datetime` | local time | strftime format (`%F %T`) |
| `statline.system` | `hostname`, `kernel_release`, `load_avg`, `uptime` | host name, kernel release, load averages, uptime as `Xh Ym` | unused |
| `statline.system` | `gid`, `uid`, `username` | group id, effective user id, user name | unused |
| `statline.system` | `entropy` | available kernel entropy (`∞` off Linux) | unused |
| `statline.system` | `temp` | whole degrees Celsius from a millidegree sensor file | sensor file |
| `statline.disk` | `disk_free`, `disk_perc`, `disk_total`, `disk_used` | file system space | mount point (`/`) |
| `statline.ip` | `ipv4`, `ipv6` | first address of an interface | interface (`eth0`) |
| `statline.netspeeds` | `netspeed_rx`, `netspeed_tx` | bytes per second since the previous call | interface (`wlan0`) |
| `statline.ram` | `ram_free`, `ram_perc`, `ram_total`, `ram_used` | available memory; use in percent; total and used in whole GiB (`15G`) | unused |
| `statline.swap` | `swap_free`, `swap_perc`, `swap_total`, `swap_used` | swap space | unused |
| `statline.volume` | `vol_perc` | master volume of an OSS mixer in percent | mixer device (`/dev/mixer`) |
| `statline.wifi` | `wifi_essid`, `wifi_perc` | wireless network name; link quality in percent | interface (`wlan0`) |

Components that compare two readings keep their state in objects you
can also create yourself: `statline.cpu.CpuMeter(path)` with its
`percent()` method, and `statline.netspeeds.ByteCounter(template)` with
`speed(interface, interval)`.

Other helpers:

- `statline.util.fmt_human(num, base)` scales a number by 1000 or 1024
  and appends the prefix: `fmt_human(1536, 1024)` gives `"1.5 Ki"`.
- `statline.util.read_first_line(path)` and `statline.util.read_uint(path)`.
- `statline.ram.read_meminfo(path)` and `statline.swap.swap_info(path)`
  parse a meminfo file.
- `statline.wifi.rssi_to_perc(rssi)` maps dBm onto 0–100.

## Building a line from Python

`statline.cli.Component(func, fmt, arg)` pairs a function with a format
in which `%s` stands for the value and `%%` for a percent sign; any
other conversion raises `ValueError`. `render_status(components,
unknown, maxlen)` joins them, cutting the line to fewer than `maxlen`
bytes.

```python
from statline.cli import Component, render_status
from statline.cpu import cpu_perc
from statline.ram import ram_perc
from statline.system import datetime

line = render_status(
    [
        Component(cpu_perc, "cpu %s%% "),
        Component(ram_perc, "mem %s%% "),
        Component(datetime, "%s", "%F %T"),
    ],
    "n/a",
    2048,
)
print(line)
```

## Keyboard indicators and layouts

`statline.keyboard` formats values but does not read them from the X
server; the caller supplies them.

- `format_indicators(fmt, led_mask)` renders caps lock (`c`) and num
  lock (`n`) from an LED mask: without `?` the letter is lower case when
  off and upper case when on; with `?` it is shown as written only when
  on. `format_indicators("c?n", 0b11)` gives `"cN"`.
- `get_layout(syms, group)` picks a layout from an XKB symbols name:
  `get_layout("pc+us+de:2+inet(evdev)", 1)` gives `"de"`.

## What it does not do

- The components shown by the `statline` command cannot be changed from
  the command line or a configuration file; change them from Python
  with `Component` and `render_status`.
- There is no component that queries the keyboard state or layout from
  the X server.
- Battery, memory, swap, CPU usage, network speed and wireless
  components read Linux interfaces only; on other systems they return
  `None`.