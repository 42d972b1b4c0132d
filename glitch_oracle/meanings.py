"""Terminal-noir interpretations, keyed by hexagram number as a string."""

from __future__ import annotations

from typing import Dict, Optional

MEANINGS: Dict[str, Dict[str, str]] = {
    "1": {"name": "The Creative", "glitch_speak": "ROOT ACCESS GRANTED. ALL PROCESSES RUN AT FULL POWER. EXECUTE WITHOUT PAUSE."},
    "2": {"name": "The Receptive", "glitch_speak": "LISTEN MODE ENABLED. ACCEPT INCOMING PACKETS. SUPPORT THE PRIMARY THREAD."},
    "3": {"name": "Difficulty at the Beginning", "glitch_speak": "BOOT SEQUENCE UNSTABLE. DEPENDENCIES MISSING. RECRUIT HELPER PROCESSES."},
    "4": {"name": "Youthful Folly", "glitch_speak": "UNTRAINED MODEL DETECTED. QUERY ONCE. REPEATED PINGS WILL BE DROPPED."},
    "5": {"name": "Waiting", "glitch_speak": "BUFFERING... HOLD POSITION. THE DOWNLOAD COMPLETES FOR THOSE WHO WAIT."},
    "6": {"name": "Conflict", "glitch_speak": "MERGE CONFLICT. DO NOT FORCE PUSH. SEEK AN ARBITER NODE."},
    "7": {"name": "The Army", "glitch_speak": "CLUSTER MOBILIZED. DISCIPLINE IN THE SCHEDULER KEEPS THE SWARM ALIVE."},
    "8": {"name": "Holding Together", "glitch_speak": "HANDSHAKE REQUESTED. JOIN THE MESH BEFORE THE PORT CLOSES."},
    "9": {"name": "Small Taming", "glitch_speak": "THROTTLE ENGAGED. SMALL PATCHES NOW. THE BIG DEPLOY WAITS FOR RAIN."},
    "10": {"name": "Treading", "glitch_speak": "WALKING ON THE DAEMON'S TAIL. TREAD LIGHTLY. IT DOES NOT BITE THE POLITE."},
    "11": {"name": "Peace", "glitch_speak": "SIGNAL CLEAN. UPLINK AND DOWNLINK IN SYNC. ENJOY THE LOW LATENCY."},
    "12": {"name": "Standstill", "glitch_speak": "DEADLOCK. NO PACKETS CROSS THE BRIDGE. CONSERVE RESOURCES."},
    "13": {"name": "Fellowship", "glitch_speak": "OPEN CHANNEL. PEERS SHARE THE SAME PROTOCOL. BROADCAST IN THE CLEAR."},
    "14": {"name": "Great Possession", "glitch_speak": "STORAGE FULL OF VALUE. ALLOCATE GENEROUSLY. THE SUN IS OVERHEAD."},
    "15": {"name": "Modesty", "glitch_speak": "RUN AT LOW PRIORITY. THE HUMBLE PROCESS IS NEVER KILLED."},
    "16": {"name": "Enthusiasm", "glitch_speak": "HYPE SIGNAL RISING. SYNC THE CLOCKS. MOVE THE CROWD ON THE BEAT."},
    "17": {"name": "Following", "glitch_speak": "SUBSCRIBE TO THE LEADER. ADAPT TO THE STREAM. REST WHEN IT IS DARK."},
    "18": {"name": "Work on the Decayed", "glitch_speak": "LEGACY CODE ROTTING. REFACTOR WHAT THE ANCESTORS BROKE."},
    "19": {"name": "Approach", "glitch_speak": "PROXIMITY ALERT. THE CONNECTION GROWS STRONGER. ACT BEFORE THE EIGHTH MONTH."},
    "20": {"name": "Contemplation", "glitch_speak": "READ-ONLY MODE. OBSERVE THE SYSTEM FROM THE TOWER. LOG EVERYTHING."},
    "21": {"name": "Biting Through", "glitch_speak": "OBSTRUCTION IN THE PIPE. BITE THROUGH. ENFORCE THE RULES."},
    "22": {"name": "Grace", "glitch_speak": "SKIN LOADED. SURFACE SHINES. DO NOT MISTAKE THE THEME FOR THE KERNEL."},
    "23": {"name": "Splitting Apart", "glitch_speak": "FILESYSTEM CORRUPTING FROM THE TOP. DO NOT WRITE. WAIT FOR THE REBUILD."},
    "24": {"name": "Return", "glitch_speak": "REBOOT COMPLETE. THE SIGNAL RETURNS AFTER SEVEN CYCLES."},
    "25": {"name": "Innocence", "glitch_speak": "NO HIDDEN AGENDA IN THE CODE. RUN AS WRITTEN. UNEXPECTED ERRORS PASS."},
    "26": {"name": "Great Taming", "glitch_speak": "POWER STORED IN THE CAPACITOR. HOLD THE CHARGE. FEED THE WISE."},
    "27": {"name": "Nourishing", "glitch_speak": "CHECK WHAT YOU INGEST. INPUT SHAPES OUTPUT. SANITIZE THE FEED."},
    "28": {"name": "Great Exceeding", "glitch_speak": "LOAD BEYOND SPEC. THE BEAM SAGS. REDISTRIBUTE OR FAIL."},
    "29": {"name": "The Abysmal", "glitch_speak": "STACK OVERFLOW. DANGER REPEATS. KEEP THE CORE LOOP SINCERE."},
    "30": {"name": "The Clinging", "glitch_speak": "DISPLAY AT MAX BRIGHTNESS. CLING TO THE POWER SOURCE. BURN CLEAN."},
    "31": {"name": "Influence", "glitch_speak": "MUTUAL ATTRACTION DETECTED. OPEN THE SOCKET. RECEIVE WITHOUT FILTERS."},
    "32": {"name": "Duration", "glitch_speak": "UPTIME IS THE ONLY METRIC. KEEP THE DAEMON RUNNING."},
    "33": {"name": "Retreat", "glitch_speak": "DISCONNECT GRACEFULLY. A TIMELY LOGOUT IS NOT DEFEAT."},
    "34": {"name": "Great Power", "glitch_speak": "OVERCLOCKED. RAW POWER ONLINE. DO NOT RAM THE FIREWALL."},
    "35": {"name": "Progress", "glitch_speak": "PROGRESS BAR ADVANCING. THE DAEMON IS REWARDED WITH BANDWIDTH."},
    "36": {"name": "Darkening of the Light", "glitch_speak": "GO DARK. HIDE THE LIGHT BEHIND THE FIREWALL. PERSIST IN SECRET."},
    "37": {"name": "The Family", "glitch_speak": "LOCAL NETWORK IN ORDER. EACH NODE KNOWS ITS ROLE."},
    "38": {"name": "Opposition", "glitch_speak": "VERSIONS DIVERGE. SMALL MERGES STILL POSSIBLE. EXPECT GHOSTS."},
    "39": {"name": "Obstruction", "glitch_speak": "ROUTE BLOCKED. TURN BACK. SEEK ANOTHER GATEWAY."},
    "40": {"name": "Deliverance", "glitch_speak": "LOCK RELEASED. FORGIVE THE STALE THREADS. CLEAR THE QUEUE."},
    "41": {"name": "Decrease", "glitch_speak": "STRIP THE BLOAT. LESS CODE, MORE SIGNAL. SACRIFICE THE CACHE."},
    "42": {"name": "Increase", "glitch_speak": "BANDWIDTH EXPANDING. SHIP IT NOW. CROSS THE GREAT WATER."},
    "43": {"name": "Breakthrough", "glitch_speak": "EXPLOIT PUBLISHED. ANNOUNCE IT AT THE KING'S COURT. DO NOT ARM YOURSELF."},
    "44": {"name": "Coming to Meet", "glitch_speak": "UNKNOWN DEVICE PAIRING. DO NOT TRUST THE FIRST HANDSHAKE."},
    "45": {"name": "Gathering Together", "glitch_speak": "NODES CONVERGING ON ONE SERVER. BRING AN OFFERING. PREPARE FOR SURGE."},
    "46": {"name": "Pushing Upward", "glitch_speak": "ASCENDING THE PRIVILEGE TREE. STEP BY STEP. NO EXPLOITS NEEDED."},
    "47": {"name": "Oppression", "glitch_speak": "RESOURCE STARVATION. WORDS ARE NOT TRUSTED. KEEP THE INNER PROCESS ALIVE."},
    "48": {"name": "The Well", "glitch_speak": "SHARED LIBRARY. THE SOURCE NEVER CHANGES. DO NOT BREAK THE BUCKET."},
    "49": {"name": "Revolution", "glitch_speak": "FORCED UPDATE. MOLT THE OLD FIRMWARE. THE NEW ORDER IS TRUSTED."},
    "50": {"name": "The Cauldron", "glitch_speak": "COMPILER HOT. TRANSFORM RAW INPUT INTO SACRED BINARY."},
    "51": {"name": "The Arousing", "glitch_speak": "SURGE DETECTED. SHOCK THROUGH THE GRID. LAUGH AFTER THE SPIKE."},
    "52": {"name": "Keeping Still", "glitch_speak": "IDLE STATE. HALT ALL THREADS. STILL THE CURSOR."},
    "53": {"name": "Development", "glitch_speak": "GRADUAL ROLLOUT. ONE PERCENT AT A TIME. THE GOOSE REACHES THE SHORE."},
    "54": {"name": "The Marrying Maiden", "glitch_speak": "SUBORDINATE PROCESS. ACCEPT THE LOWER PRIORITY OR FAULT."},
    "55": {"name": "Abundance", "glitch_speak": "PEAK THROUGHPUT. NOON OF THE CYCLE. DO NOT MOURN THE DECLINE."},
    "56": {"name": "The Wanderer", "glitch_speak": "ROAMING ON FOREIGN NETWORK. STAY LOW PROFILE. ENCRYPT EVERYTHING."},
    "57": {"name": "The Gentle", "glitch_speak": "SOFT PATCH. PENETRATE LIKE WIND. PERSISTENCE OVER FORCE."},
    "58": {"name": "The Joyous", "glitch_speak": "SIGNAL JOYOUS. SHARE THE STREAM. TRUTH TRAVELS IN THE CHAT."},
    "59": {"name": "Dispersion", "glitch_speak": "DEFRAGMENTING. DISSOLVE THE BLOCKS. CROSS THE GREAT WATER."},
    "60": {"name": "Limitation", "glitch_speak": "RATE LIMIT APPLIED. BOUNDARIES KEEP THE SYSTEM STABLE. NOT TOO TIGHT."},
    "61": {"name": "Inner Truth", "glitch_speak": "CHECKSUM VALID. THE CORE IS HONEST. EVEN THE PIGS RECEIVE THE SIGNAL."},
    "62": {"name": "Small Exceeding", "glitch_speak": "MINOR OVERFLOW. DO SMALL THINGS. THE BIRD SHOULD NOT FLY TOO HIGH."},
    "63": {"name": "After Completion", "glitch_speak": "BUILD PASSED. ALL TESTS GREEN. CORRUPTION BEGINS AT THE END."},
    "64": {"name": "Before Completion", "glitch_speak": "COMPILING... NOT YET DONE. THE FOX WETS ITS TAIL AT THE LAST STEP."},
}


def glitch_speak(number: Optional[int]) -> str:
    """Interpretive phrase for a hexagram number, with display fallbacks."""
    if not number:
        return "NO DATA"
    meaning = MEANINGS.get(str(number))
    return meaning["glitch_speak"] if meaning else f"UNKNOWN HEXAGRAM {number}"
