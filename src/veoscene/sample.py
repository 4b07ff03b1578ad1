"""Bundled sample scene: a 5-minute luxury commercial.

Usable without calling the generation service, and shaped exactly like a
service reply.
"""

import copy
from typing import Any, Dict

from .models.scene import GeneratedScene

SAMPLE_SCENE: Dict[str, Any] = {
    "overview": {
        "title": "The Artisan's Dawn",
        "duration": "5 minutes",
        "type": "Luxury Commercial",
        "mood": "Warm intimacy meeting cold precision",
        "location": "Swiss watchmaking atelier",
        "logline": "A master horologist begins his day, where centuries of tradition meet singular dedication.",
    },
    "architecture": {
        "totalDuration": 300,
        "totalShots": 18,
        "actCount": 3,
        "acts": [
            {
                "actNumber": 1,
                "title": "The Awakening",
                "startTime": "00:00",
                "endTime": "01:30",
                "durationSeconds": 90,
                "emotionalArc": "Quiet anticipation building to purposeful clarity",
                "shots": [
                    {
                        "shotNumber": 1,
                        "startTime": "00:00",
                        "endTime": "00:15",
                        "durationSeconds": 15,
                        "cameraType": "Wide establishing",
                        "lens": "35mm anamorphic",
                        "movement": "Static, locked-off",
                        "lighting": "Pre-dawn blue hour, exterior light through frosted windows",
                        "emotionalIntent": "Establish sacred workspace before human presence",
                        "soundCue": "Silence. Single clock tick at 00:12",
                        "description": "The atelier in pre-dawn darkness. Workbenches lined with brass instruments. Frost on window panes. A single antique clock in deep background.",
                    },
                    {
                        "shotNumber": 2,
                        "startTime": "00:15",
                        "endTime": "00:33",
                        "durationSeconds": 18,
                        "cameraType": "Medium wide",
                        "lens": "50mm",
                        "movement": "Slow dolly forward",
                        "lighting": "Side-light through door, silhouette",
                        "emotionalIntent": "Human arrival as ritual beginning",
                        "soundCue": "Door mechanism, soft footfall on wood",
                        "description": "Door opens. Silhouette of the artisan enters frame and pauses at the threshold.",
                    },
                    {
                        "shotNumber": 3,
                        "startTime": "00:33",
                        "endTime": "00:50",
                        "durationSeconds": 17,
                        "cameraType": "Insert detail",
                        "lens": "90mm tilt-shift",
                        "movement": "Static with focus pull",
                        "lighting": "Soft natural plus warm tungsten practical",
                        "emotionalIntent": "Hands as instruments of precision",
                        "soundCue": "Lamp switch click",
                        "description": "Aged hands reach for the work lamp switch. Wedding band catches light. Lamp illuminates the bench.",
                    },
                    {
                        "shotNumber": 4,
                        "startTime": "00:50",
                        "endTime": "01:10",
                        "durationSeconds": 20,
                        "cameraType": "Extreme close-up",
                        "lens": "100mm macro",
                        "movement": "Locked",
                        "lighting": "Ring light through loupe",
                        "emotionalIntent": "Threshold moment as the day's work begins",
                        "soundCue": "Music begins: solo cello, pianissimo",
                        "description": "Eye behind loupe. Iris adjusts. Reflection of a watch movement visible in the curved glass.",
                    },
                    {
                        "shotNumber": 5,
                        "startTime": "01:10",
                        "endTime": "01:30",
                        "durationSeconds": 20,
                        "cameraType": "Insert",
                        "lens": "100mm macro",
                        "movement": "Imperceptible track right",
                        "lighting": "Edge-lit, dramatic falloff",
                        "emotionalIntent": "Tool as extension of will",
                        "soundCue": "Cello sustains, tool-to-metal whisper",
                        "description": "Tweezers lift a hairspring. Metal catches light. Precision measured in microns.",
                    },
                ],
            },
            {
                "actNumber": 2,
                "title": "The Labor",
                "startTime": "01:30",
                "endTime": "03:30",
                "durationSeconds": 120,
                "emotionalArc": "Deep focus through challenge to breakthrough",
                "shots": [
                    {
                        "shotNumber": 6,
                        "startTime": "01:30",
                        "endTime": "01:45",
                        "durationSeconds": 15,
                        "cameraType": "Wide",
                        "lens": "32mm",
                        "movement": "Slow arc right",
                        "lighting": "Window light grown stronger, blue hour ending",
                        "emotionalIntent": "Time passing within timelessness",
                        "soundCue": "Cello joined by viola, texture builds",
                        "description": "Full workshop visible. The artisan is an island of focus. Light shifts warmer through the windows.",
                    },
                    {
                        "shotNumber": 7,
                        "startTime": "01:45",
                        "endTime": "02:00",
                        "durationSeconds": 15,
                        "cameraType": "Close-up hands",
                        "lens": "85mm macro",
                        "movement": "Subtle handheld",
                        "lighting": "Task lamp, high key on workspace",
                        "emotionalIntent": "Tension of a delicate operation",
                        "soundCue": "Music drops to a single sustained note",
                        "description": "Both hands working in concert. Right steadies, left adjusts. A bead of sweat at the temple, edge of frame.",
                    },
                    {
                        "shotNumber": 8,
                        "startTime": "02:00",
                        "endTime": "02:18",
                        "durationSeconds": 18,
                        "cameraType": "Extreme close-up",
                        "lens": "105mm macro with diopter",
                        "movement": "Locked, focus breathing",
                        "lighting": "Fiber optic spot lighting",
                        "emotionalIntent": "Critical moment of assembly",
                        "soundCue": "Silence except breathing",
                        "description": "Escape wheel placement. Tool tip guides the component. Tolerance is unforgiving.",
                    },
                    {
                        "shotNumber": 9,
                        "startTime": "02:18",
                        "endTime": "02:32",
                        "durationSeconds": 14,
                        "cameraType": "Reaction close-up",
                        "lens": "85mm",
                        "movement": "Static",
                        "lighting": "Natural with practical fill",
                        "emotionalIntent": "Human cost of precision",
                        "soundCue": "Exhale. Distant clock ticks resume.",
                        "description": "Face shows strain. Breath released. Micro-expression of uncertainty.",
                    },
                    {
                        "shotNumber": 10,
                        "startTime": "02:32",
                        "endTime": "02:52",
                        "durationSeconds": 20,
                        "cameraType": "Insert sequence",
                        "lens": "100mm macro",
                        "movement": "Static, quick cuts within shot",
                        "lighting": "Consistent task lighting",
                        "emotionalIntent": "Momentum of expertise overcoming doubt",
                        "soundCue": "Music returns, building momentum",
                        "description": "Rapid succession: screw turns, jewel seats, spring tensions. Mastery in motion.",
                    },
                    {
                        "shotNumber": 11,
                        "startTime": "02:52",
                        "endTime": "03:08",
                        "durationSeconds": 16,
                        "cameraType": "Medium profile",
                        "lens": "50mm",
                        "movement": "Imperceptible dolly back",
                        "lighting": "Morning light now golden through windows",
                        "emotionalIntent": "Satisfaction approaching",
                        "soundCue": "Music reaches first crescendo",
                        "description": "The artisan sits back slightly. Assessment. Something has been achieved.",
                    },
                    {
                        "shotNumber": 12,
                        "startTime": "03:08",
                        "endTime": "03:20",
                        "durationSeconds": 12,
                        "cameraType": "Macro insert",
                        "lens": "100mm macro",
                        "movement": "Slow push",
                        "lighting": "Dramatic side-light",
                        "emotionalIntent": "Verification of success",
                        "soundCue": "Music sustains, anticipatory",
                        "description": "Completed movement in its case. All components aligned. Waiting for the test.",
                    },
                    {
                        "shotNumber": 13,
                        "startTime": "03:20",
                        "endTime": "03:30",
                        "durationSeconds": 10,
                        "cameraType": "Extreme close-up",
                        "lens": "105mm macro",
                        "movement": "Locked",
                        "lighting": "Spot on balance wheel",
                        "emotionalIntent": "The moment of truth",
                        "soundCue": "Music drops to nothing. Tick. Tick. Tick.",
                        "description": "Balance wheel receives its impulse. Oscillation begins. Perfect rhythm established.",
                    },
                ],
            },
            {
                "actNumber": 3,
                "title": "The Completion",
                "startTime": "03:30",
                "endTime": "05:00",
                "durationSeconds": 90,
                "emotionalArc": "Quiet triumph resolving to humble continuity",
                "shots": [
                    {
                        "shotNumber": 14,
                        "startTime": "03:30",
                        "endTime": "03:45",
                        "durationSeconds": 15,
                        "cameraType": "Close-up reaction",
                        "lens": "85mm",
                        "movement": "Static with breath movement",
                        "lighting": "Golden hour wrap-around",
                        "emotionalIntent": "Private moment of achievement",
                        "soundCue": "Ticking continues. Gentle musical resolution begins.",
                        "description": "The artisan's face. Hint of a smile. Eyes still on the movement. Pride without arrogance.",
                    },
                    {
                        "shotNumber": 15,
                        "startTime": "03:45",
                        "endTime": "04:00",
                        "durationSeconds": 15,
                        "cameraType": "Wide with tilt",
                        "lens": "35mm",
                        "movement": "Crane up and back",
                        "lighting": "Full morning light floods the space",
                        "emotionalIntent": "Return to the world outside the work",
                        "soundCue": "Room tone returns. Distant street sounds.",
                        "description": "Workshop transformed by full morning light. Windows blazing. The artisan small within the larger frame.",
                    },
                    {
                        "shotNumber": 16,
                        "startTime": "04:00",
                        "endTime": "04:18",
                        "durationSeconds": 18,
                        "cameraType": "Insert beauty shot",
                        "lens": "90mm tilt-shift",
                        "movement": "Subtle rotation",
                        "lighting": "Glamour lighting, controlled reflections",
                        "emotionalIntent": "Object elevated to art",
                        "soundCue": "Solo piano enters",
                        "description": "Completed watch on velvet. Dial catches light. Hands precisely set.",
                    },
                    {
                        "shotNumber": 17,
                        "startTime": "04:18",
                        "endTime": "04:40",
                        "durationSeconds": 22,
                        "cameraType": "Following medium",
                        "lens": "35mm",
                        "movement": "Smooth tracking shot",
                        "lighting": "Window backlight, silhouette edges",
                        "emotionalIntent": "Ritual of closing mirrors the opening",
                        "soundCue": "Footsteps on wood. Music resolving.",
                        "description": "The artisan removes the loupe, rubs his eyes, stands and walks to the window. Looks out at the day now fully begun.",
                    },
                    {
                        "shotNumber": 18,
                        "startTime": "04:40",
                        "endTime": "05:00",
                        "durationSeconds": 20,
                        "cameraType": "Wide final",
                        "lens": "24mm",
                        "movement": "Static",
                        "lighting": "Full daylight, workshop glowing",
                        "emotionalIntent": "Tomorrow there will be another watch",
                        "soundCue": "Music ends. Clock ticks remain. Fade.",
                        "description": "Workshop from the entrance. Artisan silhouette at the window. Empty workbench awaits. Until tomorrow.",
                    },
                ],
            },
        ],
    },
    "timingMap": {
        "totalRuntime": "05:00",
        "tolerance": "±2 seconds",
        "breakdown": [
            {"act": 1, "start": "00:00", "end": "01:30", "shots": 5},
            {"act": 2, "start": "01:30", "end": "03:30", "shots": 8},
            {"act": 3, "start": "03:30", "end": "05:00", "shots": 5},
        ],
    },
    "veoPrompt": """SCENE: THE ARTISAN'S DAWN
Duration: 5 minutes | Style: Luxury Commercial | Location: Swiss Watchmaking Atelier

VISUAL APPROACH: Warm intimacy meeting cold precision. Dawn-to-morning light progression. Macro detail work intercut with human moments. Reverent, unhurried pacing. Anamorphic characteristics where possible.

COLOR PALETTE: Pre-dawn blues moving into golden hour warmth. Rich wood tones. Brass and steel accents. Deep shadows preserved.

---

ACT 1: THE AWAKENING [00:00-01:30]
Emotional arc: Quiet anticipation building to purposeful clarity

SHOT 1 [00:00-00:15] Wide establishing, 35mm anamorphic, locked-off. Pre-dawn atelier, brass instruments on workbenches, frost on windows, antique clock in background. Blue hour light through frosted glass. Sound: silence, single clock tick at 00:12.

SHOT 2 [00:15-00:33] Medium wide, 50mm, slow dolly forward. Door opens, artisan silhouette enters and pauses at threshold. Side-light through door. Sound: door mechanism, soft footfall.

SHOT 3 [00:33-00:50] Insert, 90mm tilt-shift, focus pull. Aged hands reach for lamp switch, wedding band catches light, lamp illuminates. Sound: lamp click.

SHOT 4 [00:50-01:10] Extreme close-up, 100mm macro, locked. Eye behind loupe, iris adjusts, watch movement reflected. Ring light through loupe. Sound: solo cello begins, pianissimo.

SHOT 5 [01:10-01:30] Insert, 100mm macro, imperceptible track right. Tweezers lift hairspring, metal catches light. Edge-lit, dramatic falloff. Sound: cello sustains, tool whisper.

---

ACT 2: THE LABOR [01:30-03:30]
Emotional arc: Deep focus through challenge to breakthrough

SHOT 6 [01:30-01:45] Wide, 32mm, slow arc right. Full workshop, artisan as island of focus, light shifting warmer. Sound: viola joins cello.

SHOT 7 [01:45-02:00] Close-up hands, 85mm macro, subtle handheld. Both hands in concert, sweat bead at temple edge. Task lamp high key. Sound: single sustained note.

SHOT 8 [02:00-02:18] Extreme close-up, 105mm macro with diopter, locked with focus breathing. Escape wheel placement. Fiber optic spot. Sound: silence, breathing only.

SHOT 9 [02:18-02:32] Reaction close-up, 85mm, static. Face shows strain, breath released. Natural with fill. Sound: exhale, distant clock.

SHOT 10 [02:32-02:52] Insert sequence, 100mm macro, static with quick cuts. Screw turns, jewel seats, spring tensions. Sound: music builds momentum.

SHOT 11 [02:52-03:08] Medium profile, 50mm, imperceptible dolly back. Artisan sits back, assessment moment. Golden morning light. Sound: first crescendo.

SHOT 12 [03:08-03:20] Macro insert, 100mm, slow push. Completed movement in case, components aligned. Dramatic side-light. Sound: music sustains.

SHOT 13 [03:20-03:30] Extreme close-up, 105mm macro, locked. Balance wheel receives impulse, begins oscillation. Spot on wheel. Sound: music drops. Tick. Tick. Tick.

---

ACT 3: THE COMPLETION [03:30-05:00]
Emotional arc: Quiet triumph resolving to humble continuity

SHOT 14 [03:30-03:45] Close-up reaction, 85mm, static with breath. Hint of smile, pride without arrogance. Golden wrap-around light. Sound: ticking, gentle resolution begins.

SHOT 15 [03:45-04:00] Wide with tilt, 35mm, crane up and back. Workshop flooded with morning light, artisan small in frame. Sound: room tone returns, street sounds.

SHOT 16 [04:00-04:18] Insert beauty shot, 90mm tilt-shift, subtle rotation. Completed watch on velvet, dial catching light. Glamour lighting. Sound: solo piano enters.

SHOT 17 [04:18-04:40] Following medium, 35mm, smooth tracking. Artisan removes loupe, stands, walks to window and looks out. Window backlight. Sound: footsteps, music resolving.

SHOT 18 [04:40-05:00] Wide final, 24mm, static. Workshop from entrance, artisan silhouette at window, empty workbench awaits. Full daylight. Sound: music ends, clock ticks, fade.

---

TECHNICAL NOTES:
- Shoot 4K minimum, 6K preferred for macro detail
- Frame rate: 24fps primary, 48fps for select slow-motion options
- Audio: production sound for ambience, foley for tool details
- Color: log capture, grade toward warm highlights and preserved blacks""",
    "qualityChecklist": [
        "Total runtime verified at 300 seconds within ±2 second tolerance",
        "All 18 shots include specific lens, camera type, movement, and lighting specifications",
        "Three-act emotional arc clearly defined with distinct progression per act",
    ],
}


def sample_scene() -> GeneratedScene:
    """Return the sample as a read-only scene."""
    return GeneratedScene.model_validate(copy.deepcopy(SAMPLE_SCENE))
