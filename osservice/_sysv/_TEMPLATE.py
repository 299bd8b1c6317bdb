"""Default SysV init script."""

SYSV_SCRIPT = """#!/bin/sh
# For RedHat and cousins:
# chkconfig: - 99 01
# description: {{ Description }}
# processname: {{ Path }}

### BEGIN INIT INFO
# Provides:          {{ Name }}
# Required-Start:    $local_fs $network{% for dep in Dependencies %} {{ dep }}{% endfor %}

# Required-Stop:     $local_fs $network{% for dep in Dependencies %} {{ dep }}{% endfor %}

# Default-Start:     2 3 4 5
# Default-Stop:      0 1 6
# Short-Description: {{ DisplayName or Name }}
# Description:       {{ Description }}
### END INIT INFO

cmd={{ ([Path] + Arguments)|cmdline|cmd }}

name={{ Name|cmd }}
pid_file="/var/run/$name.pid"
stdout_log="/var/log/$name.log"
stderr_log="/var/log/$name.err"
{% for key, value in EnvVars|dictsort %}
export {{ key }}={{ value|cmd }}
{% endfor %}

get_pid() {
    cat "$pid_file"
}

is_running() {
    [ -f "$pid_file" ] && kill -0 $(get_pid) > /dev/null 2>&1
}

case "$1" in
    start)
        if is_running; then
            echo "Already started"
        else
            echo "Starting $name"
{% if WorkingDirectory %}
            cd {{ WorkingDirectory|cmd }}
{% endif %}
{% if UserName %}
            su -s /bin/sh -c "exec $cmd" {{ UserName|cmd }} >> "$stdout_log" 2>> "$stderr_log" &
{% else %}
            eval "exec $cmd" >> "$stdout_log" 2>> "$stderr_log" &
{% endif %}
            echo $! > "$pid_file"
            if ! is_running; then
                echo "Unable to start, see $stdout_log and $stderr_log"
                exit 1
            fi
        fi
    ;;
    stop)
        if is_running; then
            echo -n "Stopping $name.."
            kill $(get_pid)
            for i in $(seq 1 10)
            do
                if ! is_running; then
                    break
                fi
                echo -n "."
                sleep 1
            done
            echo
            if is_running; then
                echo "Not stopped; may still be shutting down or shutdown may have failed"
                exit 1
            else
                echo "Stopped"
                if [ -f "$pid_file" ]; then
                    rm "$pid_file"
                fi
            fi
        else
            echo "Not running"
        fi
    ;;
    restart)
        $0 stop
        if is_running; then
            echo "Unable to stop, will not attempt to start"
            exit 1
        fi
        $0 start
    ;;
    status)
        if is_running; then
            echo "$name is running, pid $(get_pid)"
        else
            echo "$name is not running"
            exit 3
        fi
    ;;
    *)
    echo "Usage: $0 {start|stop|restart|status}"
    exit 1
    ;;
esac
exit 0
"""
