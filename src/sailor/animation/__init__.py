from sailor.animation.easing import (clamp, fast_out_slow_in,  # noqa: F401
                                     lerp, linear)
from sailor.animation.spring import SpringDamper  # noqa: F401
from sailor.animation.tween import (ColorTween, InfiniteTransition,  # noqa: F401
                                    Tween)
