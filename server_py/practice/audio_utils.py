"""Prepare uploaded recordings for the Azure Speech SDK (16 kHz mono PCM WAV) using ffmpeg."""
from typing import Optional
import logging
import os
import shutil
import subprocess
import tempfile

from errors import ConfigurationError, MissingInputError

logger = logging.getLogger(__name__)

def is_wav(audio_data: bytes) -> bool:
    return len(audio_data) >= 12 and audio_data[:4] == b"RIFF" and audio_data[8:12] == b"WAVE"

def find_ffmpeg() -> Optional[str]:
    """Find ffmpeg: check PATH first, then the winget install location on Windows."""
    ffmpeg_path = shutil.which("ffmpeg")
    if ffmpeg_path:
        return ffmpeg_path

    winget_base = os.path.join(os.environ.get("LOCALAPPDATA", ""), "Microsoft", "WinGet", "Packages")
    if not os.path.isdir(winget_base):
        return None
    for item in os.listdir(winget_base):
        if "FFmpeg" not in item:
            continue
        ffmpeg_dir = os.path.join(winget_base, item)
        for subdir in os.listdir(ffmpeg_dir):
            if subdir.startswith("ffmpeg-") and subdir.endswith("-full_build"):
                bin_path = os.path.join(ffmpeg_dir, subdir, "bin", "ffmpeg.exe")
                if os.path.exists(bin_path):
                    return bin_path
    return None

def write_wav_tempfile(audio_data: bytes) -> str:
    """
    Write the recording to a temporary WAV file and return its path.
    Non-WAV uploads (WebM/Ogg from MediaRecorder) are converted with ffmpeg.
    The caller deletes the file.
    """
    if is_wav(audio_data):
        with tempfile.NamedTemporaryFile(delete=False, suffix=".wav") as tmp:
            tmp.write(audio_data)
            return tmp.name

    ffmpeg_path = find_ffmpeg()
    if not ffmpeg_path:
        raise ConfigurationError("ffmpeg is required to convert non-WAV recordings but was not found")

    with tempfile.NamedTemporaryFile(delete=False, suffix=".webm") as tmp_input:
        tmp_input.write(audio_data)
        tmp_input_path = tmp_input.name
    tmp_wav_path = tmp_input_path[:-len(".webm")] + ".wav"

    try:
        subprocess.run([
            ffmpeg_path, "-i", tmp_input_path,
            "-acodec", "pcm_s16le",  # PCM format
            "-ar", "16000",           # 16kHz sample rate
            "-ac", "1",               # Mono
            "-y",                     # Overwrite output file
            tmp_wav_path
        ], check=True, capture_output=True)
    except subprocess.CalledProcessError as e:
        logger.warning("[Audio] ffmpeg conversion failed: %s", e.stderr.decode(errors="replace")[-300:])
        if os.path.exists(tmp_wav_path):
            os.unlink(tmp_wav_path)
        raise MissingInputError("Could not decode the audio recording") from e
    finally:
        os.unlink(tmp_input_path)

    return tmp_wav_path
