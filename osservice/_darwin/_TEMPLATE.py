"""Default launchd property list."""

LAUNCHD_CONFIG = """<?xml version='1.0' encoding='UTF-8'?>
<!DOCTYPE plist PUBLIC "-//Apple Computer//DTD PLIST 1.0//EN" "http://www.apple.com/DTDs/PropertyList-1.0.dtd" >
<plist version='1.0'>
  <dict>
    <key>Label</key>
    <string>{{ Name|e }}</string>
    <key>ProgramArguments</key>
    <array>
      <string>{{ Path|e }}</string>
{% for arg in Arguments %}
      <string>{{ arg|e }}</string>
{% endfor %}
    </array>
{% if UserName %}
    <key>UserName</key>
    <string>{{ UserName|e }}</string>
{% endif %}
{% if WorkingDirectory %}
    <key>WorkingDirectory</key>
    <string>{{ WorkingDirectory|e }}</string>
{% endif %}
{% if EnvVars %}
    <key>EnvironmentVariables</key>
    <dict>
{% for key, value in EnvVars|dictsort %}
      <key>{{ key|e }}</key>
      <string>{{ value|e }}</string>
{% endfor %}
    </dict>
{% endif %}
    <key>SessionCreate</key>
    <{{ SessionCreate|bool }}/>
    <key>KeepAlive</key>
    <{{ KeepAlive|bool }}/>
    <key>RunAtLoad</key>
    <{{ RunAtLoad|bool }}/>
    <key>Disabled</key>
    <false/>
  </dict>
</plist>
"""
